"""
Tests for service configuration loading.
"""

import pytest

from shared.config import get_config
from shared.errors import ConfigurationError
from service_clientes.app.main import ClientesService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from developer environment variables and .env files."""
    for name in ("CLIENTES_JWT_KEY", "CLIENTES_JWT_ISSUER", "CLIENTES_JWT_AUDIENCE", "CLIENTES_ENV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_missing_key_is_fatal():
    with pytest.raises(ConfigurationError) as exc_info:
        get_config("clientes")
    assert "jwt_key" in exc_info.value.details["fields"]


def test_service_refuses_to_start_without_key():
    with pytest.raises(ConfigurationError):
        ClientesService()


def test_short_key_is_rejected():
    with pytest.raises(ConfigurationError):
        get_config("clientes", jwt_key="too-short")


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CLIENTES_JWT_KEY", "k" * 32)
    monkeypatch.setenv("CLIENTES_JWT_ISSUER", "issuer-from-env")
    monkeypatch.setenv("CLIENTES_JWT_AUDIENCE", "audience-from-env")

    config = get_config("clientes")

    assert config.jwt_issuer == "issuer-from-env"
    assert config.jwt_audience == "audience-from-env"
    assert config.jwt_key_bytes == b"k" * 32
    assert config.jwt_clock_skew_seconds == 30
    assert config.token_ttl_seconds == 3600


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("CLIENTES_JWT_KEY=" + "d" * 40 + "\n")
    assert get_config("clientes").jwt_key == "d" * 40


def test_docs_only_in_local_env(monkeypatch):
    monkeypatch.setenv("CLIENTES_JWT_KEY", "k" * 32)
    monkeypatch.setenv("CLIENTES_ENV", "production")

    service = ClientesService()

    paths = {route.path for route in service.app.routes}
    assert "/docs" not in paths
    assert "/openapi.json" not in paths
