"""
Posts API Endpoints.

REST API endpoints for the post lifecycle. Mutating routes require a
bearer token; reads are public and only ever return live posts.
"""

from fastapi import APIRouter, Query

from beehively.backend.core.dependencies import CurrentUserId, DbSession, RequestId
from beehively.backend.schemas.base import ApiResponse, ResponseMetadata
from beehively.backend.schemas.post import (
    BulkDeleteResponse,
    PostCreate,
    PostDeleteResponse,
    PostIdsRequest,
    PostResponse,
    PostUpdate,
    RestoreResponse,
)
from beehively.backend.services.post import PostService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[PostResponse],
    status_code=201,
    summary="Create a post",
    description="Create a new post owned by the caller. Status defaults to draft.",
)
async def create_post(
    data: PostCreate,
    db: DbSession,
    caller_id: CurrentUserId,
    request_id: RequestId,
) -> ApiResponse[PostResponse]:
    """Create a new post."""
    service = PostService(db)
    post = await service.create_post(caller_id, data)
    return ApiResponse(
        data=PostResponse.model_validate(post),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    response_model=ApiResponse[list[PostResponse]],
    summary="List posts",
    description="List live posts, newest first, optionally filtered by status and author.",
)
async def list_posts(
    db: DbSession,
    request_id: RequestId,
    status: str | None = Query(
        default=None,
        description="draft, published or archived",
    ),
    author: str | None = Query(
        default=None,
        description="Author user ID",
    ),
) -> ApiResponse[list[PostResponse]]:
    """List live posts."""
    service = PostService(db)
    posts = await service.list_posts(status=status, author_id=author)
    return ApiResponse(
        data=[PostResponse.model_validate(post) for post in posts],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "/bulk-delete",
    response_model=ApiResponse[BulkDeleteResponse],
    summary="Soft delete several posts",
    description=(
        "Soft delete the caller's live posts among the given IDs. "
        "IDs that do not match are skipped."
    ),
)
async def bulk_delete_posts(
    data: PostIdsRequest,
    db: DbSession,
    caller_id: CurrentUserId,
    request_id: RequestId,
) -> ApiResponse[BulkDeleteResponse]:
    """Soft delete several posts."""
    service = PostService(db)
    deleted_ids = await service.bulk_soft_delete(data.ids, caller_id)
    return ApiResponse(
        data=BulkDeleteResponse(deleted_ids=deleted_ids),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "/restore",
    response_model=ApiResponse[RestoreResponse],
    summary="Restore soft-deleted posts",
    description="Restore the caller's soft-deleted posts among the given IDs.",
)
async def restore_posts(
    data: PostIdsRequest,
    db: DbSession,
    caller_id: CurrentUserId,
    request_id: RequestId,
) -> ApiResponse[RestoreResponse]:
    """Restore soft-deleted posts."""
    service = PostService(db)
    restored_ids, posts = await service.restore_posts(data.ids, caller_id)
    return ApiResponse(
        data=RestoreResponse(
            restored_ids=restored_ids,
            posts=[PostResponse.model_validate(post) for post in posts],
        ),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{post_id}",
    response_model=ApiResponse[PostResponse],
    summary="Get a post",
    description="Get a single live post by ID.",
)
async def get_post(
    post_id: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[PostResponse]:
    """Get a post by ID."""
    service = PostService(db)
    post = await service.get_post(post_id)
    return ApiResponse(
        data=PostResponse.model_validate(post),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{post_id}",
    response_model=ApiResponse[PostResponse],
    summary="Update a post",
    description="Update an existing post. Only provided fields are changed.",
)
async def update_post(
    post_id: str,
    data: PostUpdate,
    db: DbSession,
    caller_id: CurrentUserId,
    request_id: RequestId,
) -> ApiResponse[PostResponse]:
    """Update a post."""
    service = PostService(db)
    post = await service.update_post(post_id, caller_id, data)
    return ApiResponse(
        data=PostResponse.model_validate(post),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{post_id}",
    response_model=ApiResponse[PostDeleteResponse],
    summary="Delete a post",
    description="Soft delete a post. It can be brought back with /restore.",
)
async def delete_post(
    post_id: str,
    db: DbSession,
    caller_id: CurrentUserId,
    request_id: RequestId,
) -> ApiResponse[PostDeleteResponse]:
    """Soft delete a post."""
    service = PostService(db)
    deleted_id = await service.soft_delete_post(post_id, caller_id)
    return ApiResponse(
        data=PostDeleteResponse(post_id=deleted_id),
        metadata=ResponseMetadata(request_id=request_id),
    )
