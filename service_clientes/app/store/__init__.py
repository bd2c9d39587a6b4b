"""
Customer storage.

The store lives in process memory for the lifetime of the service; there
is no persistence layer.
"""

from .customer_store import Customer, CustomerStore, DEFAULT_SEED

__all__ = ["Customer", "CustomerStore", "DEFAULT_SEED"]
