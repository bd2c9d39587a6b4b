"""
Request and response models for the Clientes API.

Wire names follow the public contract (``nome``/``sobrenome``), while the
store speaks ``first_name``/``last_name``.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .store import Customer


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""
    username: Optional[str] = Field(None, description="Account username")
    password: Optional[str] = Field(None, description="Account password")


class TokenResponse(BaseModel):
    """Successful login response."""
    access_token: str = Field(..., description="Signed JWT")
    token_type: str = Field(default="Bearer", description="Authorization scheme")
    expires_in: int = Field(..., description="Token lifetime in seconds")


class CustomerPayload(BaseModel):
    """Body accepted by create and replace. Any client-sent id is ignored."""
    nome: Optional[str] = Field(None, description="First name")
    sobrenome: Optional[str] = Field(None, description="Last name")

    def is_complete(self) -> bool:
        return bool(self.nome and self.nome.strip()) and bool(
            self.sobrenome and self.sobrenome.strip()
        )


class CustomerResponse(BaseModel):
    """Customer representation returned to clients."""
    id: int = Field(..., description="Server-assigned identifier")
    nome: str = Field(..., description="First name")
    sobrenome: str = Field(..., description="Last name")

    @classmethod
    def from_record(cls, customer: Customer) -> "CustomerResponse":
        return cls(id=customer.id, nome=customer.first_name, sobrenome=customer.last_name)
