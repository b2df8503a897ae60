"""
Users API Endpoints.

Public author profile pages.
"""

from fastapi import APIRouter

from beehively.backend.core.dependencies import DbSession, RequestId
from beehively.backend.schemas.base import ApiResponse, ResponseMetadata
from beehively.backend.schemas.post import PostResponse, UserSummary
from beehively.backend.schemas.user import PublicProfileResponse
from beehively.backend.services.user import UserService

router = APIRouter()


@router.get(
    "/{user_id}",
    response_model=ApiResponse[PublicProfileResponse],
    summary="Get a public profile",
    description="A user's name and email plus their live published posts.",
)
async def get_public_profile(
    user_id: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[PublicProfileResponse]:
    """Get a user's public profile."""
    service = UserService(db)
    user, posts = await service.get_public_profile(user_id)
    return ApiResponse(
        data=PublicProfileResponse(
            user=UserSummary.model_validate(user),
            posts=[PostResponse.model_validate(post) for post in posts],
        ),
        metadata=ResponseMetadata(request_id=request_id),
    )
