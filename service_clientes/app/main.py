"""
Clientes service for the Clientes Access API.

Issues bearer tokens for the demo accounts and serves token-protected CRUD
on the in-memory customer resource under ``/api/v1``.
"""

from datetime import timedelta
from typing import List, Optional

from fastapi import Depends, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import AuthenticationError, NotFoundError, ValidationError
from .auth import AuthContext, BearerTokenVerifier, CredentialVerifier, DemoCredentialVerifier, TokenIssuer
from .models import CustomerPayload, CustomerResponse, LoginRequest, TokenResponse
from .store import CustomerStore

API_PREFIX = "/api/v1"


class ClientesService(BaseService):
    """Clientes service implementation."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        store: Optional[CustomerStore] = None,
        credential_verifier: Optional[CredentialVerifier] = None,
    ):
        super().__init__("clientes", config)
        self.store = store if store is not None else CustomerStore()
        self.credential_verifier = credential_verifier or DemoCredentialVerifier()
        self.token_issuer = TokenIssuer(
            self.config.jwt_key_bytes,
            issuer=self.config.jwt_issuer,
            audience=self.config.jwt_audience,
            default_ttl=timedelta(seconds=self.config.token_ttl_seconds),
        )
        self.token_verifier = BearerTokenVerifier(
            self.config.jwt_key_bytes,
            issuer=self.config.jwt_issuer,
            audience=self.config.jwt_audience,
            clock_skew_seconds=self.config.jwt_clock_skew_seconds,
            metrics=self.metrics,
        )
        self._refresh_store_gauge()

        self._setup_auth_routes()
        self._setup_customer_routes()

    def _setup_auth_routes(self):
        """Set up login routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "clientes",
                "message": "Clientes Access API - Clientes Service",
                "version": "1.0.0"
            }

        @self.app.post(f"{API_PREFIX}/auth/login", response_model=TokenResponse)
        def login(credentials: LoginRequest):
            """Exchange demo credentials for a signed bearer token."""
            if not self.credential_verifier.validate(credentials.username, credentials.password):
                self.metrics.increment_counter("logins_total", outcome="failure")
                self.logger.info("login_failed", username=credentials.username)
                raise AuthenticationError("Invalid credentials.")

            issued = self.token_issuer.issue_token(credentials.username)
            self.metrics.increment_counter("logins_total", outcome="success")
            self.metrics.record_business_event("login_succeeded")
            self.logger.info("login_succeeded", username=issued.subject, jti=issued.token_id)

            return TokenResponse(
                access_token=issued.token,
                token_type="Bearer",
                expires_in=issued.expires_in,
            )

    def _setup_customer_routes(self):
        """Set up token-protected customer routes."""

        async def require_identity(
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(self.token_verifier.scheme),
        ) -> AuthContext:
            return self.token_verifier.authenticate(credentials)

        @self.app.get(f"{API_PREFIX}/clientes", response_model=List[CustomerResponse])
        def list_customers(identity: AuthContext = Depends(require_identity)):
            """List every customer."""
            return [CustomerResponse.from_record(c) for c in self.store.list_all()]

        @self.app.get(
            f"{API_PREFIX}/clientes/{{customer_id:int}}",
            response_model=CustomerResponse,
            name="get_customer",
        )
        def get_customer(customer_id: int, identity: AuthContext = Depends(require_identity)):
            """Fetch one customer by id."""
            customer = self.store.get(customer_id)
            if customer is None:
                raise NotFoundError(f"Customer {customer_id} not found")
            return CustomerResponse.from_record(customer)

        @self.app.post(
            f"{API_PREFIX}/clientes",
            response_model=CustomerResponse,
            status_code=status.HTTP_201_CREATED,
        )
        def create_customer(
            payload: CustomerPayload,
            request: Request,
            response: Response,
            identity: AuthContext = Depends(require_identity),
        ):
            """Create a customer; the id is assigned by the server."""
            self._require_names(payload)

            customer = self.store.add(payload.nome, payload.sobrenome)
            self._record_mutation("create")
            self.logger.info("customer_created", customer_id=customer.id)

            response.headers["Location"] = str(request.url_for("get_customer", customer_id=customer.id))
            return CustomerResponse.from_record(customer)

        @self.app.put(
            f"{API_PREFIX}/clientes/{{customer_id:int}}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
        )
        def replace_customer(
            customer_id: int,
            payload: CustomerPayload,
            identity: AuthContext = Depends(require_identity),
        ):
            """Replace a customer's names, keeping its id. Blank names are stored trimmed."""
            if payload.nome is None or payload.sobrenome is None:
                raise ValidationError("Both nome and sobrenome must be provided.")

            if not self.store.update(customer_id, payload.nome, payload.sobrenome):
                raise NotFoundError(f"Customer {customer_id} not found")

            self._record_mutation("update")
            self.logger.info("customer_updated", customer_id=customer_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.app.delete(
            f"{API_PREFIX}/clientes/{{customer_id:int}}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
        )
        def delete_customer(customer_id: int, identity: AuthContext = Depends(require_identity)):
            """Delete a customer."""
            if self.store.get(customer_id) is None:
                raise NotFoundError(f"Customer {customer_id} not found")

            self.store.delete(customer_id)
            self._record_mutation("delete")
            self.logger.info("customer_deleted", customer_id=customer_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def _require_names(payload: CustomerPayload) -> None:
        if not payload.is_complete():
            raise ValidationError("Both nome and sobrenome are required.")

    def _record_mutation(self, operation: str) -> None:
        self.metrics.increment_counter("customer_operations_total", operation=operation)
        self.metrics.record_business_event(f"customer_{operation}")
        self._refresh_store_gauge()

    def _refresh_store_gauge(self) -> None:
        self.metrics.set_gauge("customers_stored", len(self.store))

    async def _check_dependencies(self):
        """The service has no external dependencies; report the store."""
        return {"customer_store": "ok"}


def create_app(config: Optional[ServiceConfig] = None):
    """Create FastAPI application."""
    service = ClientesService(config)
    return service.app


if __name__ == "__main__":
    service = ClientesService()
    service.run()
