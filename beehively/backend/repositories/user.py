"""
User Repository.

Data access layer for user accounts.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from beehively.backend.models.user import User
from beehively.backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    model = User

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address (case-insensitive)."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email address is already registered."""
        return await self.get_by_email(email) is not None
