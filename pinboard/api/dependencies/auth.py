"""
Authentication Dependencies

FastAPI dependencies for caller identification.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract the bearer token from the header
           │
           ▼
    get_current_user_id()     ← Verify the token, return the user_id claim

Whether that id still belongs to a user is checked by the AccessGate in
the service layer.

Type Aliases:
=============
    CurrentUserId - UUID of the authenticated caller

Usage:
======
    from pinboard.api.dependencies.auth import CurrentUserId

    @router.get("/me")
    async def get_me(current_user_id: CurrentUserId):
        ...
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pinboard.shared.core.exceptions import AuthenticationError
from pinboard.shared.utils.security import SecurityUtils


# Security scheme for Bearer tokens; a missing header is reported as 401 below
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> str:
    """
    Extract the JWT from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    return credentials.credentials


async def get_current_user_id(
    token: Annotated[str, Depends(get_current_user_token)],
) -> UUID:
    """
    Decode the token into the caller's user id.

    Raises:
        AuthenticationError: If the token is expired, invalid, or has no user_id
    """
    try:
        return SecurityUtils.read_user_token(token)
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated caller (most common dependency)
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
