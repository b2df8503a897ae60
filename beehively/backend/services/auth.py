"""
Auth Service.

Account signup and login. Both return the user together with a freshly
issued bearer token whose subject is the user ID.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from beehively.backend.core.config import get_app_config
from beehively.backend.core.exceptions import (
    DuplicateError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from beehively.backend.core.security import (
    create_access_token,
    hash_password,
    verify_password,
)
from beehively.backend.models.user import User
from beehively.backend.repositories.user import UserRepository
from beehively.backend.schemas.user import LoginRequest, SignupRequest
from beehively.backend.services.base import BaseService


class AuthService(BaseService):
    """Service for account creation and credential checks."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = UserRepository(session)

    async def signup(self, data: SignupRequest) -> tuple[User, str]:
        """
        Register a new account.

        Returns:
            Tuple of (created user, access token)

        Raises:
            ForbiddenError: If signup is disabled in features.yaml
            ValidationError: If a field is missing, the email is malformed
                or the password is too short
            DuplicateError: If the email is already registered
        """
        app_config = get_app_config()
        if not app_config.features.auth_signup_enabled:
            raise ForbiddenError("Signup is disabled")

        self._validate_required(data.model_dump(), ["name", "email", "password"])

        email = data.email.strip().lower()
        if "@" not in email:
            raise ValidationError("invalid email", details={"email": data.email})
        self._validate_string_length(
            data.password,
            "password",
            min_length=app_config.security.password.min_length,
        )

        if await self.repo.exists_by_email(email):
            raise DuplicateError("User already exists")

        self._log_operation("Creating account", email=email)

        user = await self._execute_db_operation(
            "signup",
            self.repo.create(
                name=data.name.strip(),
                email=email,
                hashed_password=hash_password(data.password),
            ),
        )
        return user, create_access_token(user.id)

    async def login(self, data: LoginRequest) -> tuple[User, str]:
        """
        Exchange email and password for an access token.

        Raises:
            ValidationError: If email or password is missing
            UnauthorizedError: If the credentials do not match an account
        """
        self._validate_required(data.model_dump(), ["email", "password"])

        user = await self.repo.get_by_email(data.email.strip())
        if user is None or not verify_password(data.password, user.hashed_password):
            self._log_operation("Login rejected", email=data.email)
            raise UnauthorizedError("Invalid credentials")

        self._log_debug("Login succeeded", user_id=user.id)
        return user, create_access_token(user.id)
