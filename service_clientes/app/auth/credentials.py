"""
Credential verification for the login endpoint.
"""

from typing import Dict, Optional, Protocol


class CredentialVerifier(Protocol):
    """Anything that can decide whether a username/password pair is valid."""

    def validate(self, username: Optional[str], password: Optional[str]) -> bool:
        ...


# Demo accounts; stand-in for a real identity provider.
DEMO_CREDENTIALS: Dict[str, str] = {
    "admin": "admin",
    "teste": "123456",
}


class DemoCredentialVerifier:
    """Accepts only the fixed demo username/password pairs."""

    def __init__(self, credentials: Optional[Dict[str, str]] = None):
        self._credentials = dict(DEMO_CREDENTIALS if credentials is None else credentials)

    def validate(self, username: Optional[str], password: Optional[str]) -> bool:
        if username is None or password is None:
            return False
        expected = self._credentials.get(username)
        return expected is not None and expected == password
