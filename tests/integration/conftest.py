"""
Integration Test Fixtures.

Fixtures for integration tests - uses real database and services.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from functools import partial
from types import SimpleNamespace
from typing import Any
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from beehively.backend.core.database import get_db_session
from beehively.backend.core.security import hash_password

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-testing-purposes"

# Minimum bcrypt cost keeps signup fast in tests
FAST_BCRYPT_ROUNDS = 4


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with database session override.

    The client uses the test database session, ensuring all API
    operations use the same session that gets rolled back after the test.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    # No config/.env exists in test runs, so the secrets boundary is stubbed
    settings = SimpleNamespace(jwt_secret=TEST_JWT_SECRET, db_password="")
    with (
        patch("beehively.backend.core.config.get_settings", return_value=settings),
        patch("beehively.backend.core.security.get_settings", return_value=settings),
        patch(
            "beehively.backend.services.auth.hash_password",
            partial(hash_password, rounds=FAST_BCRYPT_ROUNDS),
        ),
    ):
        from beehively.backend.main import create_app

        app = create_app()
        app.dependency_overrides[get_db_session] = override_get_db_session

        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as test_client:
            yield test_client

        app.dependency_overrides.clear()


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert API response is successful.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is True, f"Response not successful: {data}"
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return data

    @staticmethod
    def assert_validation_error(response: Any) -> dict[str, Any]:
        """Assert API response is a domain validation error (400)."""
        return ApiAssertions.assert_error(response, 400, "VAL_VALIDATION_ERROR")


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()


# =============================================================================
# Authentication Fixtures
# =============================================================================


Registrar = Callable[..., Awaitable[tuple[str, dict[str, str]]]]


@pytest.fixture
def register(client: AsyncClient) -> Registrar:
    """
    Sign up a user through the API.

    Returns a coroutine function giving (user_id, auth headers).

    Usage:
        async def test_create(client, register):
            user_id, headers = await register("ada@example.com")
            await client.post("/api/v1/posts", json={...}, headers=headers)
    """

    async def _register(
        email: str = "ada@example.com",
        name: str = "Ada",
        password: str = "secret-password",
    ) -> tuple[str, dict[str, str]]:
        response = await client.post(
            "/api/v1/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        body = response.json()["data"]
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    return _register
