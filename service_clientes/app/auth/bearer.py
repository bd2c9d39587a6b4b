"""
Bearer token verification for the customer endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from shared.errors import AuthorizationError
from shared.logging import get_logger, set_user_context
from shared.metrics import MetricsCollector
from .token_issuer import ALGORITHM


@dataclass(frozen=True)
class AuthContext:
    """Authenticated request context derived from a verified JWT."""

    subject: str
    token_id: Optional[str]
    claims: Dict[str, Any]


class BearerTokenVerifier:
    """Validates HS256 JWTs against the shared secret, issuer and audience."""

    def __init__(
        self,
        key: bytes,
        issuer: str,
        audience: str,
        *,
        clock_skew_seconds: int = 30,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        self._key = key
        self.issuer = issuer
        self.audience = audience
        self.clock_skew_seconds = clock_skew_seconds
        self.metrics = metrics
        self.logger = get_logger("clientes.bearer")
        # Header parsing only; rejection is ours so the error envelope stays uniform.
        self.scheme = HTTPBearer(auto_error=False)

    def verify(self, token: str) -> AuthContext:
        """Validate ``token`` and return the authenticated context."""
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                audience=self.audience,
                issuer=self.issuer,
                options={
                    "leeway": self.clock_skew_seconds,
                    "require_exp": True,
                    "require_iss": True,
                    "require_aud": True,
                    "require_sub": True,
                },
            )
        except ExpiredSignatureError as exc:
            self._reject("expired", exc)
        except JWTError as exc:
            self._reject("invalid", exc)

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            self._reject("invalid", JWTError("Token missing subject"))

        self._record("valid")
        return AuthContext(subject=subject, token_id=claims.get("jti"), claims=claims)

    def authenticate(self, credentials: Optional[HTTPAuthorizationCredentials]) -> AuthContext:
        """Resolve the bearer credentials FastAPI extracted from the request."""
        if credentials is None:
            self._record("missing")
            raise AuthorizationError("Missing or invalid Authorization header")

        token = credentials.credentials.strip()
        if not token:
            self._record("missing")
            raise AuthorizationError("Authorization header contained empty bearer token")

        context = self.verify(token)
        set_user_context(context.subject)
        return context

    def _reject(self, status: str, exc: Exception) -> None:
        self._record(status)
        self.logger.warning("Bearer token rejected", reason=status, error=str(exc))
        message = "Token expired" if status == "expired" else "Invalid token"
        raise AuthorizationError(message) from exc

    def _record(self, status: str) -> None:
        if self.metrics is not None:
            self.metrics.increment_counter("token_validations_total", status=status)
