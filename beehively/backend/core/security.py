"""
Security Utilities.

Password hashing and bearer-token issuance/verification.
"""

from datetime import timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from beehively.backend.core.config import get_app_config, get_settings
from beehively.backend.core.exceptions import UnauthorizedError
from beehively.backend.core.logging import get_logger
from beehively.backend.core.utils import utc_now

logger = get_logger(__name__)


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor; defaults to security.yaml password.bcrypt_rounds
    """
    if rounds is None:
        rounds = get_app_config().security.password.bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token for a user.

    Args:
        subject: User ID stored in the "sub" claim
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt

    if expires_delta is None:
        expires_delta = timedelta(minutes=jwt_config.access_token_expire_minutes)

    to_encode = {
        "sub": subject,
        "exp": utc_now() + expires_delta,
        "type": "access",
        "aud": jwt_config.audience,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=jwt_config.algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        UnauthorizedError: If token is invalid or expired
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
    except JWTError as e:
        logger.warning("Token decode failed", extra={"error": str(e)})
        raise UnauthorizedError("Invalid or expired token")


def get_token_subject(token: str) -> str:
    """
    Resolve the user ID carried by an access token.

    Raises:
        UnauthorizedError: If the token is invalid, not an access token,
            or has no subject
    """
    payload = decode_token(token)
    subject = payload.get("sub")
    if payload.get("type") != "access" or not subject:
        raise UnauthorizedError("Invalid or expired token")
    return str(subject)
