"""
Post Service.

Business logic for the post lifecycle: creation, partial edits, soft
delete (single and bulk) and restore, plus the live-only read queries.

Every mutating operation takes the caller's user ID explicitly and
enforces ownership against the post's author. A post is "live" while
its deleted_at is NULL; soft-deleted posts are invisible to reads and
can only come back through restore_posts.
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from beehively.backend.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from beehively.backend.core.utils import utc_now
from beehively.backend.models.post import POST_STATUSES, Post, PostStatus
from beehively.backend.repositories.post import PostRepository
from beehively.backend.schemas.post import PostCreate, PostUpdate
from beehively.backend.services.base import BaseService
from beehively.backend.services.tags import normalize_tags

TITLE_MAX_LENGTH = 255


class PostService(BaseService):
    """
    Service for post business logic.

    Failure modes shared by the operations below:
        ValidationError: malformed IDs, missing/blank fields, unknown status
        NotFoundError:   no matching post
        ForbiddenError:  caller is not the post's author
        ConflictError:   operation not valid for a soft-deleted post
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = PostRepository(session)

    # -------------------------------------------------------------------------
    # Validation helpers
    # -------------------------------------------------------------------------

    def _validate_status(self, status: Any) -> str:
        if status not in POST_STATUSES:
            raise ValidationError(
                "invalid status",
                details={"status": status, "allowed": sorted(POST_STATUSES)},
            )
        return status

    def _validate_text(self, fields: dict[str, Any], name: str) -> str:
        value = fields.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(
                f"{name} cannot be empty",
                details={name: "must be a non-empty string"},
            )
        if name == "title":
            value = value.strip()
            self._validate_string_length(value, "title", max_length=TITLE_MAX_LENGTH)
        return value

    def _validate_id_set(self, post_ids: Iterable[Any] | None) -> list[str]:
        """Validate a caller-supplied ID set, collapsing duplicates."""
        if not post_ids:
            raise ValidationError(
                "ids must be a non-empty list",
                details={"ids": "required"},
            )
        validated = [self._validate_id(post_id, "post id") for post_id in post_ids]
        return list(dict.fromkeys(validated))

    async def _load_hydrated(self, post_id: str) -> Post:
        post = await self.repo.get_with_author(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    async def _get_owned_post(self, post_id: str, caller_id: str, action: str) -> Post:
        """
        Load a post (live or deleted) and check the caller owns it.

        Raises:
            ValidationError: If post_id is malformed
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller is not the author
        """
        post_id = self._validate_id(post_id, "post id")
        post = await self.repo.get_with_author(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        if post.author_id != caller_id:
            self._log_operation(
                "Rejected post access by non-owner",
                post_id=post_id,
                caller_id=caller_id,
                action=action,
            )
            raise ForbiddenError(f"You are not allowed to {action} this post")
        return post

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def create_post(self, author_id: str, data: PostCreate) -> Post:
        """
        Create a new live post owned by author_id.

        Status defaults to draft; tags are normalized.

        Raises:
            ValidationError: If title/content are missing or status is invalid
        """
        fields = data.model_dump()
        self._validate_required(fields, ["title", "content"])
        title = self._validate_text(fields, "title")
        content = self._validate_text(fields, "content")
        status = (
            PostStatus.DRAFT.value
            if data.status is None
            else self._validate_status(data.status)
        )
        tags = normalize_tags(data.tags)

        self._log_operation("Creating post", author_id=author_id, status=status)

        post = await self._execute_db_operation(
            "create_post",
            self.repo.create(
                title=title,
                content=content,
                status=status,
                tags=tags,
                author_id=author_id,
                deleted_at=None,
            ),
        )

        self._log_debug("Post created", post_id=post.id)
        return await self._load_hydrated(post.id)

    async def update_post(self, post_id: str, caller_id: str, data: PostUpdate) -> Post:
        """
        Apply a partial update to a post.

        Only fields present in the request are considered. Ownership and
        deletion state are checked before any field, so editing a deleted
        post is a ConflictError whatever the payload.
        """
        post = await self._get_owned_post(post_id, caller_id, "edit")
        if post.is_deleted:
            raise ConflictError("Cannot edit a deleted post")

        provided = data.model_dump(exclude_unset=True)
        changes: dict[str, Any] = {}

        for name in ("title", "content"):
            if name in provided:
                changes[name] = self._validate_text(provided, name)
        if "status" in provided:
            changes["status"] = self._validate_status(provided["status"])
        if "tags" in provided:
            changes["tags"] = normalize_tags(provided["tags"])

        if not changes:
            return post

        self._log_operation(
            "Updating post",
            post_id=post.id,
            fields=list(changes.keys()),
        )

        await self._execute_db_operation(
            "update_post",
            self.repo.update(post, **changes),
        )
        return await self._load_hydrated(post.id)

    async def soft_delete_post(self, post_id: str, caller_id: str) -> str:
        """
        Soft delete a single post.

        Returns:
            The deleted post's ID

        Raises:
            ConflictError: If the post is already soft-deleted
        """
        post = await self._get_owned_post(post_id, caller_id, "delete")
        if post.is_deleted:
            raise ConflictError("Post is already deleted")

        self._log_operation("Soft deleting post", post_id=post.id)

        await self._execute_db_operation(
            "soft_delete_post",
            self.repo.set_deleted_at([post], utc_now()),
        )
        return post.id

    async def bulk_soft_delete(self, post_ids: Iterable[Any] | None, caller_id: str) -> list[str]:
        """
        Soft delete every live post among post_ids that the caller owns.

        IDs that are unknown, owned by someone else or already deleted are
        skipped without error.

        Returns:
            IDs actually deleted, in store retrieval order

        Raises:
            ValidationError: If post_ids is empty or contains a malformed ID
            NotFoundError: If nothing matched
        """
        ids = self._validate_id_set(post_ids)
        posts = await self.repo.select_owned(ids, caller_id, deleted=False)
        if not posts:
            raise NotFoundError("No matching posts found to delete")

        deleted_ids = [post.id for post in posts]
        self._log_operation(
            "Bulk soft deleting posts",
            requested=len(ids),
            matched=len(deleted_ids),
        )

        await self._execute_db_operation(
            "bulk_soft_delete",
            self.repo.set_deleted_at(posts, utc_now()),
        )
        return deleted_ids

    async def restore_posts(
        self,
        post_ids: Iterable[Any] | None,
        caller_id: str,
    ) -> tuple[list[str], list[Post]]:
        """
        Restore every soft-deleted post among post_ids that the caller owns.

        Returns:
            Tuple of (restored IDs, restored posts with authors loaded)

        Raises:
            ValidationError: If post_ids is empty or contains a malformed ID
            NotFoundError: If nothing matched
        """
        ids = self._validate_id_set(post_ids)
        posts = await self.repo.select_owned(ids, caller_id, deleted=True)
        if not posts:
            raise NotFoundError("No deleted posts found to restore")

        restored_ids = [post.id for post in posts]
        self._log_operation(
            "Restoring posts",
            requested=len(ids),
            matched=len(restored_ids),
        )

        await self._execute_db_operation(
            "restore_posts",
            self.repo.set_deleted_at(posts, None),
        )
        restored = await self.repo.select_owned(restored_ids, caller_id, deleted=False)
        return restored_ids, restored

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    async def get_post(self, post_id: str) -> Post:
        """
        Get a live post by ID.

        Raises:
            ValidationError: If post_id is malformed
            NotFoundError: If no live post has that ID
        """
        post_id = self._validate_id(post_id, "post id")
        post = await self.repo.get_live_with_author(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    async def list_posts(
        self,
        status: str | None = None,
        author_id: str | None = None,
    ) -> list[Post]:
        """
        List live posts, newest first. Empty filter values are ignored.

        Raises:
            ValidationError: If status is unknown or author_id is malformed
        """
        if status:
            self._validate_status(status)
        if author_id:
            author_id = self._validate_id(author_id, "author id")

        self._log_debug("Listing posts", status=status, author_id=author_id)
        return await self.repo.list_live(
            status=status or None,
            author_id=author_id or None,
        )
