"""
Authentication package.

Provides the pieces the Clientes service uses to authenticate callers:

- Checking demo credentials behind a pluggable verifier interface.
- Issuing HS256-signed JWTs for accepted users.
- Validating bearer tokens (signature, issuer, audience, lifetime with
  clock skew) on every protected request.
"""

from .bearer import AuthContext, BearerTokenVerifier
from .credentials import CredentialVerifier, DemoCredentialVerifier
from .token_issuer import IssuedToken, TokenIssuer

__all__ = [
    "AuthContext",
    "BearerTokenVerifier",
    "CredentialVerifier",
    "DemoCredentialVerifier",
    "IssuedToken",
    "TokenIssuer",
]
