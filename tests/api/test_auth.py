"""
Test suite for bearer token authentication.

Tests TokenVerifier directly and the 401 responses of protected routes.

System role: Verification of request authentication
"""

from unittest.mock import MagicMock

import pytest

from backend.api.deps.auth import TokenVerifier
from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthError

PROTECTED_URL = "/api/v1/documents"
WRONG_SECRET = "another-secret-that-is-also-long-enough-for-hs256"


@pytest.fixture
def verifier(test_settings) -> TokenVerifier:
    return TokenVerifier(test_settings.auth)


class TestTokenVerifier:
    """Test suite for TokenVerifier.verify()."""

    def test_valid_token_should_return_subject(self, verifier: TokenVerifier, make_token) -> None:
        assert verifier.verify(make_token("user-42")) == "user-42"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"expires_in": -3600},
            {"secret": WRONG_SECRET},
            {"sub": None},
            {"audience": "someone-else"},
            {"audience": None},
        ],
        ids=["expired", "wrong-secret", "missing-sub", "wrong-audience", "missing-audience"],
    )
    def test_invalid_token_should_raise_auth_error(
        self, verifier: TokenVerifier, make_token, overrides: dict
    ) -> None:
        with pytest.raises(AuthError, match="Invalid or expired token"):
            verifier.verify(make_token(**overrides))

    def test_garbage_token_should_raise_auth_error(self, verifier: TokenVerifier) -> None:
        with pytest.raises(AuthError):
            verifier.verify("not-a-jwt")

    def test_audience_check_can_be_disabled(self, make_token, test_settings) -> None:
        verifier = TokenVerifier(AuthSettings(jwt_secret=test_settings.auth.jwt_secret, audience=None))

        assert verifier.verify(make_token("user-1", audience=None)) == "user-1"

    def test_unconfigured_verifier_should_reject_everything(self, make_token) -> None:
        verifier = TokenVerifier(AuthSettings(jwt_secret=None, jwks_url=None))

        with pytest.raises(AuthError, match="not configured"):
            verifier.verify(make_token())

    def test_jwks_client_should_supply_signing_key(self, make_token, test_settings) -> None:
        # Arrange
        jwks_client = MagicMock()
        jwks_client.get_signing_key_from_jwt.return_value.key = test_settings.auth.jwt_secret.get_secret_value()
        verifier = TokenVerifier(AuthSettings(audience="authenticated"), jwks_client=jwks_client)
        token = make_token("user-7")

        # Act
        owner_id = verifier.verify(token)

        # Assert
        assert owner_id == "user-7"
        jwks_client.get_signing_key_from_jwt.assert_called_once_with(token)


class TestProtectedRoutes:
    """401 responses from the API."""

    def test_missing_header_should_return_401(self, client) -> None:
        # Act
        response = client.get(PROTECTED_URL)

        # Assert
        assert response.status_code == 401
        assert response.json() == {"detail": "No authorization header found", "error": "AuthError"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_non_bearer_scheme_should_return_401(self, client) -> None:
        response = client.get(PROTECTED_URL, headers={"Authorization": "Basic dXNlcjpwYXNz"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Malformed authorization header"

    def test_expired_token_should_return_401(self, client, make_token) -> None:
        token = make_token(expires_in=-60)

        response = client.get(PROTECTED_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    @pytest.mark.parametrize(
        "method,url,kwargs",
        [
            ("post", "/api/v1/documents/upload", {"files": {"file": ("a.txt", b"a", "text/plain")}}),
            ("post", "/api/v1/documents/search", {"json": {"query": "a"}}),
            ("post", "/api/v1/documents/chat", {"json": {"query": "a"}}),
        ],
    )
    def test_every_document_route_should_require_auth(self, client, method: str, url: str, kwargs: dict) -> None:
        response = getattr(client, method)(url, **kwargs)

        assert response.status_code == 401
