"""
Clientes Service package for the Clientes Access API.

This package exposes the FastAPI application that issues bearer tokens
and serves the customer resource:

- app.main: Application entrypoint that wires routes and lifecycle.
- app.auth: Credential check, token issuance and bearer verification.
- app.store: In-memory customer store.
- app.models: Request/response DTOs.

Design notes:
- Package import must not read configuration; settings are loaded when
  the service is constructed so a missing signing key fails at startup.
- Use the shared/ utilities for logging, metrics, config and errors.
- State (the customer store) is owned by the service instance and handed
  to the route handlers; there is no module-level singleton.
"""
