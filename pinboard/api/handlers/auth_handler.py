"""
Authentication Handler

Handles user registration and login endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Service exceptions
are rendered by the global exception handlers.
"""

from fastapi import APIRouter, Depends, status

from pinboard.api.dependencies.services import get_auth_service
from pinboard.api.handlers.responses import build_user_response
from pinboard.shared.schemas.user import AuthResponse, UserCreate, UserLogin
from pinboard.shared.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Creates a new user account and returns authentication token.

    Raises:
        400: Invalid data, or email/username already taken
    """
    user, access_token, expires_in = await auth_service.register_user(
        first_name=user_data.first_name,
        surname=user_data.surname,
        email=user_data.email,
        username=user_data.username,
        password=user_data.password,
    )

    return AuthResponse(
        user=build_user_response(user),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid
    """
    user, access_token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )

    return AuthResponse(
        user=build_user_response(user),
        access_token=access_token,
        expires_in=expires_in,
    )
