"""
Shared fixtures for Clientes service tests.
"""

import pytest
from fastapi.testclient import TestClient

from shared.config import get_config
from service_clientes.app.main import ClientesService

TEST_KEY = "unit-test-signing-key-with-enough-entropy-0123456789"
TEST_ISSUER = "clientes-tests"
TEST_AUDIENCE = "clientes-tests-clients"


@pytest.fixture
def config():
    """Service configuration with a known signing key."""
    return get_config(
        "clientes",
        jwt_key=TEST_KEY,
        jwt_issuer=TEST_ISSUER,
        jwt_audience=TEST_AUDIENCE,
    )


@pytest.fixture
def service(config):
    """Fresh ClientesService with its own store and metrics registry."""
    return ClientesService(config)


@pytest.fixture
def client(service):
    """Test client with ClientesService."""
    return TestClient(service.app)


@pytest.fixture
def auth_headers(client):
    """Authorization header obtained through the login endpoint."""
    response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
