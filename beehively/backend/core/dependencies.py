"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from beehively.backend.core.database import get_db_session
from beehively.backend.core.exceptions import UnauthorizedError
from beehively.backend.core.logging import get_logger
from beehively.backend.core.security import get_token_subject
from beehively.backend.repositories.user import UserRepository

logger = get_logger(__name__)

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]

_bearer_scheme = HTTPBearer(auto_error=False)


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


async def get_current_user_id(
    db: DbSession,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> str:
    """
    Resolve the authenticated caller's user ID from the bearer token.

    The token subject must name an existing account.

    Raises:
        UnauthorizedError: If no bearer token is sent, it does not verify,
            or its subject is not a known user
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")
    user_id = get_token_subject(credentials.credentials)
    if await UserRepository(db).get_by_id_or_none(user_id) is None:
        logger.warning("Token subject has no account", extra={"user_id": user_id})
        raise UnauthorizedError("Invalid or expired token")
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
