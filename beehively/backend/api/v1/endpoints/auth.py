"""
Auth API Endpoints.

Signup and login. Both return a bearer token for the Authorization header.
"""

from fastapi import APIRouter

from beehively.backend.core.dependencies import DbSession, RequestId
from beehively.backend.schemas.base import ApiResponse, ResponseMetadata
from beehively.backend.schemas.post import UserSummary
from beehively.backend.schemas.user import AuthResponse, LoginRequest, SignupRequest
from beehively.backend.services.auth import AuthService

router = APIRouter()


@router.post(
    "/signup",
    response_model=ApiResponse[AuthResponse],
    status_code=201,
    summary="Create an account",
)
async def signup(
    data: SignupRequest,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[AuthResponse]:
    """Create an account and return an access token."""
    service = AuthService(db)
    user, token = await service.signup(data)
    return ApiResponse(
        data=AuthResponse(token=token, user=UserSummary.model_validate(user)),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "/login",
    response_model=ApiResponse[AuthResponse],
    summary="Log in",
)
async def login(
    data: LoginRequest,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[AuthResponse]:
    """Exchange credentials for an access token."""
    service = AuthService(db)
    user, token = await service.login(data)
    return ApiResponse(
        data=AuthResponse(token=token, user=UserSummary.model_validate(user)),
        metadata=ResponseMetadata(request_id=request_id),
    )
