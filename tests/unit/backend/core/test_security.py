"""
Unit Tests for Security Module.

Black box tests against the public interface of security.py.
All cryptographic operations (bcrypt, JWT) execute for real.
Only the config boundary is stubbed with real Pydantic schema objects.
"""

from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from jose import jwt

from beehively.backend.core.config_schema import JwtSchema, PasswordSchema
from beehively.backend.core.exceptions import UnauthorizedError
from beehively.backend.core.security import (
    create_access_token,
    decode_token,
    get_token_subject,
    hash_password,
    verify_password,
)

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-testing-purposes"


@pytest.fixture
def jwt_config():
    """Real Pydantic JwtSchema with test values."""
    return JwtSchema(
        algorithm="HS256",
        access_token_expire_minutes=30,
        audience="test-api",
    )


@pytest.fixture(autouse=True)
def _stub_config(jwt_config):
    """Stub the config boundary so security functions can resolve settings."""
    settings = SimpleNamespace(jwt_secret=TEST_JWT_SECRET)
    app_config = SimpleNamespace(
        security=SimpleNamespace(
            jwt=jwt_config,
            password=PasswordSchema(min_length=6, bcrypt_rounds=4),
        )
    )
    with (
        patch("beehively.backend.core.security.get_settings", return_value=settings),
        patch("beehively.backend.core.security.get_app_config", return_value=app_config),
    ):
        yield


# =============================================================================
# Password Hashing
# =============================================================================


class TestHashPassword:
    """Tests for password hashing."""

    def test_returns_bcrypt_formatted_hash(self):
        result = hash_password("password123")
        assert result.startswith("$2b$04$")

    def test_explicit_rounds_override_config(self):
        result = hash_password("password123", rounds=5)
        assert result.startswith("$2b$05$")

    def test_same_password_produces_different_hashes(self):
        """Bcrypt salts each hash, so two calls must differ."""
        assert hash_password("identical") != hash_password("identical")


class TestVerifyPassword:
    def test_correct_password_verifies(self):
        hashed = hash_password("correct-horse-battery-staple")
        assert verify_password("correct-horse-battery-staple", hashed) is True

    def test_wrong_password_rejected(self):
        hashed = hash_password("correct-horse-battery-staple")
        assert verify_password("wrong", hashed) is False


# =============================================================================
# Tokens
# =============================================================================


class TestAccessTokens:
    """Tests for token issue and verification."""

    def test_round_trip_subject(self):
        token = create_access_token("user-1")

        assert get_token_subject(token) == "user-1"

    def test_payload_claims(self):
        payload = decode_token(create_access_token("user-1"))

        assert payload["sub"] == "user-1"
        assert payload["type"] == "access"
        assert payload["aud"] == "test-api"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))

        with pytest.raises(UnauthorizedError):
            decode_token(token)

    def test_wrong_secret_rejected(self):
        token = jwt.encode(
            {"sub": "user-1", "type": "access", "aud": "test-api"},
            "another-secret",
            algorithm="HS256",
        )

        with pytest.raises(UnauthorizedError):
            decode_token(token)

    def test_wrong_audience_rejected(self):
        token = jwt.encode(
            {"sub": "user-1", "type": "access", "aud": "other-api"},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(UnauthorizedError):
            decode_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(UnauthorizedError):
            get_token_subject("not.a.token")

    def test_non_access_token_rejected(self):
        token = jwt.encode(
            {"sub": "user-1", "type": "refresh", "aud": "test-api"},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(UnauthorizedError):
            get_token_subject(token)

    def test_missing_subject_rejected(self):
        token = jwt.encode(
            {"type": "access", "aud": "test-api"},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(UnauthorizedError):
            get_token_subject(token)
