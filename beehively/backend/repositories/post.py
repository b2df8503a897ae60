"""
Post Repository.

Data access layer for posts. Every read that feeds an API response
loads the author relationship eagerly, since lazy loading is disabled
on the model.
"""

from collections.abc import Collection
from datetime import datetime

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from beehively.backend.models.post import Post, PostStatus
from beehively.backend.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """
    Repository for Post model.

    "Live" means deleted_at IS NULL. Default reads only return live posts.
    """

    model = Post

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    @staticmethod
    def _with_author() -> Select[tuple[Post]]:
        return (
            select(Post)
            .options(selectinload(Post.author))
            .execution_options(populate_existing=True)
        )

    async def get_live_with_author(self, post_id: str) -> Post | None:
        """Get a live post by ID with its author loaded."""
        result = await self.session.execute(
            self._with_author()
            .where(Post.id == post_id)
            .where(Post.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get_with_author(self, post_id: str) -> Post | None:
        """Get a post by ID regardless of deletion state, with its author loaded."""
        result = await self.session.execute(
            self._with_author().where(Post.id == post_id)
        )
        return result.scalar_one_or_none()

    async def list_live(
        self,
        status: str | None = None,
        author_id: str | None = None,
    ) -> list[Post]:
        """
        List live posts, newest first.

        Args:
            status: Only posts with this status
            author_id: Only posts written by this user

        Returns:
            All matching posts (no pagination)
        """
        query = self._with_author().where(Post.deleted_at.is_(None))
        if status is not None:
            query = query.where(Post.status == status)
        if author_id is not None:
            query = query.where(Post.author_id == author_id)

        result = await self.session.execute(query.order_by(Post.created_at.desc()))
        return list(result.scalars().all())

    async def list_published_by_author(self, author_id: str) -> list[Post]:
        """Live published posts of one author, newest first."""
        return await self.list_live(
            status=PostStatus.PUBLISHED.value,
            author_id=author_id,
        )

    async def select_owned(
        self,
        post_ids: Collection[str],
        author_id: str,
        deleted: bool,
    ) -> list[Post]:
        """
        Select posts among post_ids owned by author_id in a given deletion state.

        Ids that do not exist, belong to someone else, or are in the other
        deletion state are simply absent from the result. Order is the
        store's natural retrieval order.

        Args:
            post_ids: Candidate post IDs
            author_id: Required owner
            deleted: True to select soft-deleted posts, False for live ones
        """
        deleted_clause = (
            Post.deleted_at.is_not(None) if deleted else Post.deleted_at.is_(None)
        )
        result = await self.session.execute(
            self._with_author()
            .where(Post.id.in_(list(post_ids)))
            .where(Post.author_id == author_id)
            .where(deleted_clause)
        )
        return list(result.scalars().all())

    async def set_deleted_at(
        self,
        posts: list[Post],
        deleted_at: datetime | None,
    ) -> list[Post]:
        """
        Set or clear the soft-delete timestamp on each post.

        Each row is written individually; there is no batch-wide transaction
        beyond the request session.
        """
        for post in posts:
            post.deleted_at = deleted_at
        await self.session.flush()
        return posts
