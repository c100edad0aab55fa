"""
Auth service.

Registers accounts and verifies credentials. Session tokens are issued
by the API layer; this service only deals with users.

Dependencies: workbench.boundary.db.CRUD, workbench.core.security
System role: Account use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from workbench.boundary.db.CRUD.user_crud import user_crud
from workbench.core.exceptions import AuthenticationError, UsernameTakenError
from workbench.core.security import hash_password, verify_password
from workbench.models.auth import UserResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Account registration and login."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize auth service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def register(self, username: str, password: str) -> UserResponse:
        """
        Create a new account.

        Args:
            username: Desired username
            password: Plaintext password

        Returns:
            UserResponse: Created user

        Raises:
            UsernameTakenError: If the username is already registered
        """
        if await user_crud.get_by_username(self.db, username) is not None:
            raise UsernameTakenError(username)

        user = await user_crud.create(
            self.db,
            username=username,
            password_hash=hash_password(password),
        )
        logger.info("User registered", extra={"user_id": str(user.id)})
        return UserResponse.model_validate(user)

    async def authenticate(self, username: str, password: str) -> UserResponse:
        """
        Verify credentials.

        Args:
            username: Account username
            password: Plaintext password

        Returns:
            UserResponse: The authenticated user

        Raises:
            AuthenticationError: If the username or password is wrong
        """
        user = await user_crud.get_by_username(self.db, username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Login failed", extra={"username": username})
            raise AuthenticationError("Invalid username or password")

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return UserResponse.model_validate(user)

    async def get_user(self, user_id: UUID) -> UserResponse:
        """
        Resolve the user behind a session token.

        Raises:
            AuthenticationError: If the account no longer exists
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise AuthenticationError("Session user no longer exists")
        return UserResponse.model_validate(user)
