"""
Security Utilities

Password hashing and JWT token management for Pinboard accounts.

Password Hashing:
=================
bcrypt through passlib, salt generated per hash.

JWT Tokens:
===========
PyJWT, HS256 by default. A Pinboard token carries one application claim,
``user_id``, plus the standard ``exp`` / ``iat`` claims. Lifetime comes from
settings.ACCESS_TOKEN_EXPIRE_MINUTES (five days unless overridden).

Usage:
======
    from pinboard.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)   # True

    token, expires_in = SecurityUtils.issue_user_token(user.id)
    user_id = SecurityUtils.read_user_token(token)         # UUID
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt
from passlib.context import CryptContext

from pinboard.config.settings import settings


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Returns:
            True if password matches, False otherwise
        """
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., user_id)
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 5 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=5)),
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    @classmethod
    def issue_user_token(cls, user_id: UUID) -> tuple[str, int]:
        """
        Issue the access token for a signed-in user.

        Returns:
            (token, expires_in seconds)
        """
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = cls.create_access_token(
            data={"user_id": str(user_id)},
            secret_key=settings.SECRET_KEY,
            expires_delta=expires_delta,
            algorithm=settings.JWT_ALGORITHM,
        )
        return token, int(expires_delta.total_seconds())

    @classmethod
    def read_user_token(cls, token: str) -> UUID:
        """
        Extract the caller's user id from a token.

        Raises:
            ValueError: Expired or invalid token, or a missing/malformed user_id claim
        """
        payload = cls.decode_access_token(token, settings.SECRET_KEY, settings.JWT_ALGORITHM)

        user_id = payload.get("user_id")
        if not user_id:
            raise ValueError("Invalid token: missing user_id")

        try:
            return UUID(str(user_id))
        except ValueError:
            raise ValueError("Invalid token: malformed user_id")
