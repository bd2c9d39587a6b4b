"""
Unit tests for credential check, token issuance and bearer verification.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.security import HTTPAuthorizationCredentials

from service_clientes.app.auth import BearerTokenVerifier, DemoCredentialVerifier, TokenIssuer
from shared.errors import AuthorizationError
from shared.metrics import MetricsCollector

KEY = b"auth-tests-signing-key-0123456789abcdef"
ISSUER = "clientes-tests"
AUDIENCE = "clientes-tests-clients"


@pytest.fixture
def issuer():
    """TokenIssuer with test settings."""
    return TokenIssuer(KEY, issuer=ISSUER, audience=AUDIENCE)


@pytest.fixture
def metrics():
    """Isolated metrics collector."""
    return MetricsCollector("clientes")


@pytest.fixture
def verifier(metrics):
    """BearerTokenVerifier with the default 30s skew."""
    return BearerTokenVerifier(KEY, issuer=ISSUER, audience=AUDIENCE, clock_skew_seconds=30, metrics=metrics)


def _forge(key=KEY, **overrides):
    """Sign claims with PyJWT, independently of the production signer."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": "admin",
        "jti": "forged",
        "iss": ISSUER,
        "aud": AUDIENCE,
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
        "exp": int((now + timedelta(hours=1)).timestamp()),
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, key, algorithm="HS256")


class TestDemoCredentialVerifier:
    """Test cases for DemoCredentialVerifier."""

    @pytest.mark.parametrize("username,password", [("admin", "admin"), ("teste", "123456")])
    def test_accepts_demo_pairs(self, username, password):
        assert DemoCredentialVerifier().validate(username, password) is True

    @pytest.mark.parametrize(
        "username,password",
        [
            ("admin", "123456"),
            ("teste", "admin"),
            ("Admin", "admin"),
            ("admin", "admin "),
            ("root", "root"),
            ("", ""),
            (None, "admin"),
            ("admin", None),
        ],
    )
    def test_rejects_everything_else(self, username, password):
        assert DemoCredentialVerifier().validate(username, password) is False

    def test_custom_table(self):
        verifier = DemoCredentialVerifier({"maria": "s3cret"})
        assert verifier.validate("maria", "s3cret") is True
        assert verifier.validate("admin", "admin") is False


class TestTokenIssuer:
    """Test cases for TokenIssuer."""

    def test_claims(self, issuer):
        issued = issuer.issue_token("admin")

        claims = jwt.decode(issued.token, KEY, algorithms=["HS256"], audience=AUDIENCE, issuer=ISSUER)
        assert claims["sub"] == "admin"
        assert claims["name"] == "admin"
        assert claims["jti"] == issued.token_id
        assert claims["exp"] - claims["iat"] == 3600
        assert claims["nbf"] == claims["iat"]
        assert issued.expires_in == 3600

    def test_header_algorithm(self, issuer):
        header = jwt.get_unverified_header(issuer.issue("teste"))
        assert header["alg"] == "HS256"

    def test_token_ids_are_unique(self, issuer):
        first = issuer.issue_token("admin")
        second = issuer.issue_token("admin")
        assert first.token_id != second.token_id
        assert first.token != second.token

    def test_custom_ttl(self, issuer):
        issued = issuer.issue_token("admin", ttl=timedelta(minutes=5))
        assert issued.expires_in == 300
        assert issuer.default_ttl_seconds == 3600


class TestBearerTokenVerifier:
    """Test cases for BearerTokenVerifier."""

    def test_round_trip_subject(self, issuer, verifier, metrics):
        context = verifier.verify(issuer.issue("teste"))

        assert context.subject == "teste"
        assert context.claims["iss"] == ISSUER
        assert metrics.sample("token_validations_total", status="valid") == 1.0

    def test_expired_within_skew_is_accepted(self, issuer, verifier):
        token = issuer.issue("admin", ttl=timedelta(seconds=-10))
        assert verifier.verify(token).subject == "admin"

    def test_expired_beyond_skew_is_rejected(self, issuer, verifier, metrics):
        token = issuer.issue("admin", ttl=timedelta(seconds=-60))

        with pytest.raises(AuthorizationError) as exc_info:
            verifier.verify(token)

        assert exc_info.value.message == "Token expired"
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}
        assert metrics.sample("token_validations_total", status="expired") == 1.0

    def test_not_yet_valid_beyond_skew_is_rejected(self, verifier):
        future = int((datetime.now(timezone.utc) + timedelta(minutes=5)).timestamp())
        with pytest.raises(AuthorizationError):
            verifier.verify(_forge(nbf=future))

    @pytest.mark.parametrize(
        "overrides",
        [
            {"key": b"some-other-signing-key-0123456789abcdef"},
            {"iss": "someone-else"},
            {"aud": "other-audience"},
            {"sub": None},
            {"exp": None},
        ],
    )
    def test_rejects_bad_tokens(self, verifier, metrics, overrides):
        with pytest.raises(AuthorizationError):
            verifier.verify(_forge(**overrides))
        assert metrics.sample("token_validations_total", status="invalid") == 1.0

    def test_forged_valid_token_is_accepted(self, verifier):
        assert verifier.verify(_forge()).subject == "admin"

    def test_rejects_garbage(self, verifier):
        with pytest.raises(AuthorizationError):
            verifier.verify("not-a-jwt")

    def test_authenticate_requires_credentials(self, verifier, metrics):
        with pytest.raises(AuthorizationError):
            verifier.authenticate(None)

        blank = HTTPAuthorizationCredentials(scheme="Bearer", credentials="   ")
        with pytest.raises(AuthorizationError):
            verifier.authenticate(blank)

        assert metrics.sample("token_validations_total", status="missing") == 2.0

    def test_authenticate_returns_context(self, issuer, verifier):
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=issuer.issue("admin"))
        assert verifier.authenticate(credentials).subject == "admin"
