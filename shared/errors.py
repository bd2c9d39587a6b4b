"""
Shared error handling for the Clientes Access API.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    code: str
    details: Dict[str, Any] = {}


class ClientesException(Exception):
    """Base exception for Clientes services."""

    status_code: int = 400

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.headers = headers
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            error=self.message,
            code=self.code,
            details=self.details
        )


class AuthenticationError(ClientesException):
    """Credentials were rejected at login."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_ERROR", message, details)


class AuthorizationError(ClientesException):
    """Bearer token missing, malformed, expired or otherwise invalid."""

    status_code = 401

    def __init__(self, message: str = "Authorization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            "AUTHORIZATION_ERROR",
            message,
            details,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ValidationError(ClientesException):
    """Validation-related errors."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class NotFoundError(ClientesException):
    """Requested resource does not exist."""

    status_code = 404

    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__("NOT_FOUND", message, details)


class ConfigurationError(ClientesException):
    """Settings could not be loaded; the service must not start."""

    status_code = 500

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
