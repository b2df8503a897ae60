"""
User Service.

Public profile lookup: a user's identity plus their live published posts.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from beehively.backend.core.exceptions import NotFoundError
from beehively.backend.models.post import Post
from beehively.backend.models.user import User
from beehively.backend.repositories.post import PostRepository
from beehively.backend.repositories.user import UserRepository
from beehively.backend.services.base import BaseService


class UserService(BaseService):
    """Service for read-only user queries."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = UserRepository(session)
        self.post_repo = PostRepository(session)

    async def get_public_profile(self, user_id: str) -> tuple[User, list[Post]]:
        """
        Get a user and their live published posts, newest first.

        Raises:
            ValidationError: If user_id is malformed
            NotFoundError: If the user does not exist
        """
        user_id = self._validate_id(user_id, "user id")
        user = await self.repo.get_by_id_or_none(user_id)
        if user is None:
            raise NotFoundError("User not found")

        posts = await self.post_repo.list_published_by_author(user_id)
        self._log_debug("Public profile loaded", user_id=user_id, posts=len(posts))
        return user, posts
