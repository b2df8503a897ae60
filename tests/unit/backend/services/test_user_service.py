"""
Unit Tests for User Service.
"""

from unittest.mock import patch
from uuid import uuid4

import pytest

from beehively.backend.core.exceptions import NotFoundError, ValidationError
from beehively.backend.models.user import User
from beehively.backend.services.user import UserService


@pytest.fixture
def service(mock_db_session):
    return UserService(mock_db_session)


class TestGetPublicProfile:
    @pytest.mark.asyncio
    async def test_returns_user_and_published_posts(self, service, make_post):
        user_id = str(uuid4())
        user = User(id=user_id, name="Ada", email="ada@example.com", hashed_password="h")
        posts = [make_post(author_id=user_id, status="published")]

        with (
            patch.object(service.repo, "get_by_id_or_none", return_value=user),
            patch.object(
                service.post_repo, "list_published_by_author", return_value=posts
            ) as mock_list,
        ):
            result_user, result_posts = await service.get_public_profile(user_id)

        assert result_user is user
        assert result_posts == posts
        mock_list.assert_called_once_with(user_id)

    @pytest.mark.asyncio
    async def test_unknown_user(self, service):
        with patch.object(service.repo, "get_by_id_or_none", return_value=None):
            with pytest.raises(NotFoundError, match="User not found"):
                await service.get_public_profile(str(uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_id(self, service):
        with pytest.raises(ValidationError):
            await service.get_public_profile("ada")
