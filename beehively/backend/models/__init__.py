# SQLAlchemy models package. Importing it registers every table on Base.metadata.
from beehively.backend.models.base import Base
from beehively.backend.models.post import POST_STATUSES, Post, PostStatus
from beehively.backend.models.user import User

__all__ = [
    "Base",
    "POST_STATUSES",
    "Post",
    "PostStatus",
    "User",
]
