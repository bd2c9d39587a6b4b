"""
JWT issuance for authenticated users.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from shared.logging import get_logger

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=1)


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed token and the claims it carries."""

    token: str
    token_id: str
    subject: str
    issued_at: datetime
    expires_at: datetime

    @property
    def expires_in(self) -> int:
        return int((self.expires_at - self.issued_at).total_seconds())


class TokenIssuer:
    """Signs HS256 JWTs for a fixed issuer/audience pair."""

    def __init__(self, key: bytes, issuer: str, audience: str, default_ttl: timedelta = DEFAULT_TTL):
        self._key = key
        self.issuer = issuer
        self.audience = audience
        self.default_ttl = default_ttl
        self.logger = get_logger("clientes.token_issuer")

    @property
    def default_ttl_seconds(self) -> int:
        return int(self.default_ttl.total_seconds())

    def issue(self, username: str, ttl: Optional[timedelta] = None) -> str:
        """Return a compact signed token for ``username``."""
        return self.issue_token(username, ttl).token

    def issue_token(self, username: str, ttl: Optional[timedelta] = None) -> IssuedToken:
        """Sign a token and return it together with its claims."""
        now = datetime.now(timezone.utc).replace(microsecond=0)
        expires = now + (ttl if ttl is not None else self.default_ttl)
        token_id = str(uuid.uuid4())

        claims: Dict[str, Any] = {
            "sub": username,
            "jti": token_id,
            "name": username,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": int(now.timestamp()),
            "nbf": int(now.timestamp()),
            "exp": int(expires.timestamp()),
        }

        token = jwt.encode(claims, self._key, algorithm=ALGORITHM)
        self.logger.debug("Token issued", subject=username, jti=token_id)

        return IssuedToken(
            token=token,
            token_id=token_id,
            subject=username,
            issued_at=now,
            expires_at=expires,
        )
