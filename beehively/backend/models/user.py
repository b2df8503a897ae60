"""
User Model.

Account records: display name, unique email and bcrypt password hash.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from beehively.backend.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from beehively.backend.models.post import Post


class User(UUIDMixin, TimestampMixin, Base):
    """User database model."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        nullable=False,
        index=True,
    )
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    posts: Mapped[list["Post"]] = relationship(back_populates="author", lazy="raise")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
