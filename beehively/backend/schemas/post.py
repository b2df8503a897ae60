"""
Post Schemas.

Pydantic schemas for post API request/response validation.

Request fields are deliberately loose: presence, emptiness and status
values are checked by PostService so that every entry point reports
them the same way.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Minimal user identity shown next to content."""

    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str | None = Field(
        default=None,
        description="Post title",
        examples=["Hello"],
    )
    content: str | None = Field(
        default=None,
        description="Post body",
        examples=["World"],
    )
    status: str | None = Field(
        default=None,
        description="draft, published or archived (defaults to draft)",
        examples=["draft"],
    )
    tags: list[str] | str | None = Field(
        default=None,
        description="List of tags or a single comma-separated string",
        examples=[["python", "web"], "python, web"],
    )


class PostUpdate(BaseModel):
    """
    Schema for updating an existing post.

    Only fields present in the request body are applied.
    """

    title: str | None = Field(default=None, description="Post title")
    content: str | None = Field(default=None, description="Post body")
    status: str | None = Field(default=None, description="draft, published or archived")
    tags: list[str] | str | None = Field(
        default=None,
        description="Replaces the tag list wholesale",
    )


class PostIdsRequest(BaseModel):
    """Body of the bulk delete and restore endpoints."""

    ids: list[str] | None = Field(
        default=None,
        description="Post IDs to act on",
    )


class PostResponse(BaseModel):
    """Schema for post in API responses."""

    id: str = Field(description="Post unique identifier")
    title: str
    content: str
    status: str
    tags: list[str]
    author: UserSummary
    deleted_at: datetime | None = Field(description="Soft-delete timestamp, null when live")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostDeleteResponse(BaseModel):
    post_id: str


class BulkDeleteResponse(BaseModel):
    deleted_ids: list[str]


class RestoreResponse(BaseModel):
    restored_ids: list[str]
    posts: list[PostResponse]
