"""
Shared configuration management for the Clientes Access API.
"""

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError

# HS256 needs at least 256 bits of key material.
MIN_JWT_KEY_BYTES = 32


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLIENTES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Security (Jwt.Issuer / Jwt.Audience / Jwt.Key)
    jwt_issuer: str = Field(default="RestClientesJwt")
    jwt_audience: str = Field(default="RestClientesJwtClients")
    jwt_key: str = Field(..., description="Symmetric HS256 signing secret")
    jwt_clock_skew_seconds: int = Field(default=30, ge=0)
    token_ttl_seconds: int = Field(default=3600, gt=0)

    @field_validator("jwt_key")
    @classmethod
    def _check_key_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) < MIN_JWT_KEY_BYTES:
            raise ValueError(
                f"jwt_key must be at least {MIN_JWT_KEY_BYTES} bytes when UTF-8 encoded"
            )
        return value

    @property
    def jwt_key_bytes(self) -> bytes:
        return self.jwt_key.encode("utf-8")


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str = "clientes"


def get_config(service_name: str, **overrides) -> ServiceConfig:
    """Get configuration for a specific service.

    Raises ConfigurationError when the settings cannot be loaded, most commonly
    because ``CLIENTES_JWT_KEY`` is missing. Callers treat this as fatal.
    """
    try:
        return ServiceConfig(service_name=service_name, **overrides)
    except PydanticValidationError as exc:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
        raise ConfigurationError(
            f"Invalid configuration for service '{service_name}'",
            details={"fields": fields},
        ) from exc
