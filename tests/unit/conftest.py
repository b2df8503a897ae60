"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from beehively.backend.models.post import Post


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = PostService(mock_db_session)
    """
    session = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def make_post():
    """
    Factory for transient Post instances (never attached to a session).

    Usage:
        post = make_post(author_id="u1", deleted_at=utc_now())
    """

    def _make_post(**overrides: Any) -> Post:
        fields: dict[str, Any] = {
            "id": str(uuid4()),
            "title": "Hello",
            "content": "World",
            "status": "draft",
            "tags": [],
            "author_id": str(uuid4()),
            "deleted_at": None,
            "created_at": datetime(2024, 1, 1),
            "updated_at": datetime(2024, 1, 1),
        }
        fields.update(overrides)
        return Post(**fields)

    return _make_post
