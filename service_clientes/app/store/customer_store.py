"""
In-memory customer store.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class Customer:
    """A customer record. Replaced wholesale on update, never mutated."""

    id: int
    first_name: str
    last_name: str


DEFAULT_SEED = (
    Customer(id=1, first_name="Ana", last_name="Silva"),
    Customer(id=2, first_name="Bruno", last_name="Souza"),
)


class CustomerStore:
    """Id-indexed customer collection guarded by a single lock.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after its record is deleted.
    """

    def __init__(self, seed: Iterable[Customer] = DEFAULT_SEED):
        self._lock = threading.Lock()
        self._customers: Dict[int, Customer] = {}
        for customer in seed:
            self._customers[customer.id] = customer
        self._next_id = max(self._customers, default=0) + 1

    def list_all(self) -> List[Customer]:
        """Snapshot of every customer in insertion order."""
        with self._lock:
            return list(self._customers.values())

    def get(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            return self._customers.get(customer_id)

    def add(self, first_name: str, last_name: str) -> Customer:
        """Create a customer with the next id and return it."""
        with self._lock:
            customer = Customer(
                id=self._next_id,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
            )
            self._next_id += 1
            self._customers[customer.id] = customer
            return customer

    def update(self, customer_id: int, first_name: str, last_name: str) -> bool:
        """Replace the names of an existing customer; False if it is absent."""
        with self._lock:
            if customer_id not in self._customers:
                return False
            self._customers[customer_id] = Customer(
                id=customer_id,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
            )
            return True

    def delete(self, customer_id: int) -> None:
        """Remove a customer. Unknown ids are ignored."""
        with self._lock:
            self._customers.pop(customer_id, None)

    @property
    def next_id(self) -> int:
        """Id the next add will receive; for inspection only."""
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def __contains__(self, customer_id: object) -> bool:
        with self._lock:
            return customer_id in self._customers
