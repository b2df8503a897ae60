"""
Post Model.

Blog post with a draft/published/archived status and soft-delete
timestamp. A post whose deleted_at is NULL is "live".
"""

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from beehively.backend.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from beehively.backend.models.user import User


class PostStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


POST_STATUSES = frozenset(status.value for status in PostStatus)


class Post(UUIDMixin, TimestampMixin, Base):
    """
    Post database model.

    author_id is set once at creation and never reassigned.
    tags holds a JSON list of unique, non-empty strings.
    """

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'published', 'archived')",
            name="ck_posts_status",
        ),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        default=PostStatus.DRAFT.value,
        nullable=False,
        index=True,
    )
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    author_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        nullable=True,
        default=None,
        index=True,
    )

    author: Mapped["User"] = relationship(back_populates="posts", lazy="raise")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title!r}, status={self.status})>"
