"""Unit tests for JWT helpers and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blog.config import AuthSettings
from blog.domain.service import JWTService
from blog.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret-0123456789abcdef0123456789")


class TestTokens:
    """Tests for create_token and verify_token."""

    def test_round_trip(self, auth_settings):
        token = create_token("a@x.com", auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.email == "a@x.com"
        assert payload.exp > datetime.now(timezone.utc)

    def test_wrong_secret_is_invalid(self, auth_settings):
        token = create_token("a@x.com", auth_settings)
        other = AuthSettings(jwt_secret="another-secret-0123456789abcdef01234")

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, other)

    def test_expired_token(self, auth_settings):
        """Expired tokens are rejected with their own message."""
        token = jwt.encode(
            {"email": "a@x.com", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)


class TestJWTService:
    """Tests for caller identity resolution."""

    def test_email_from_valid_token(self, auth_settings):
        service = JWTService(auth_settings)
        token = create_token("a@x.com", auth_settings)

        assert service.get_email_from_token(token) == "a@x.com"

    def test_missing_or_garbage_token_is_anonymous(self, auth_settings):
        """No exception, just no identity."""
        service = JWTService(auth_settings)

        assert service.get_email_from_token(None) is None
        assert service.get_email_from_token("") is None
        assert service.get_email_from_token("not-a-jwt") is None
