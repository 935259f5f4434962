"""
Authentication Service

Business logic for user authentication and registration.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, tokens)
- Domain logic

Usage:
======
    from pinboard.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token, expires = await service.register_user(
        first_name="Alice", surname=None, email="alice@example.com",
        username="alice", password="secret123",
    )
"""

from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import AuthenticationError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.user import User
from pinboard.shared.repositories.user_repository import UserRepository
from pinboard.shared.utils.security import SecurityUtils


logger = get_logger(__name__)


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration
    - User authentication (login)
    - JWT token generation

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(
        self,
        first_name: str,
        surname: Optional[str],
        email: str,
        username: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Register a new user.

        Creates a new user account and generates a JWT token.

        Args:
            first_name: Given name
            surname: Family name, optional
            email: Email address (stored lower-cased)
            username: Public handle
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            ValidationError: Invalid field, or email/username already taken
                             (details["fields"] names which)
        """
        user = await self.repo.create(
            first_name=first_name,
            surname=surname or None,
            email=email,
            username=username,
            password_hash=SecurityUtils.hash_password(password),
        )

        access_token, expires_in = SecurityUtils.issue_user_token(user.id)

        logger.info("User registered", user_id=str(user.id), username=user.username)
        return user, access_token, expires_in

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Authenticate user and generate token.

        Args:
            email: User's email address (any case)
            password: Plain text password

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid email or password")

        if not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")

        access_token, expires_in = SecurityUtils.issue_user_token(user.id)

        logger.info("User logged in", user_id=str(user.id))
        return user, access_token, expires_in
