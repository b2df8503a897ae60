"""
User Schemas.

Pydantic schemas for account and public profile payloads.
"""

from pydantic import BaseModel, ConfigDict, Field

from beehively.backend.schemas.post import PostResponse, UserSummary


class SignupRequest(BaseModel):
    """Schema for creating an account."""

    name: str | None = Field(default=None, description="Display name", examples=["Ada"])
    email: str | None = Field(default=None, description="Email address", examples=["ada@example.com"])
    password: str | None = Field(default=None, description="Plain text password")


class LoginRequest(BaseModel):
    """Schema for exchanging credentials for a token."""

    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Plain text password")


class AuthResponse(BaseModel):
    """Bearer token plus the identity it was issued for."""

    token: str = Field(description="JWT access token")
    user: UserSummary


class PublicProfileResponse(BaseModel):
    """A user's public identity and their live published posts."""

    user: UserSummary
    posts: list[PostResponse]

    model_config = ConfigDict(from_attributes=True)
