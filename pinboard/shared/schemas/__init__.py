"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, pagination, error responses
- user: User and authentication schemas
- pin: Pin, like and save schemas
- board: Board schemas
- comment: Comment and reply schemas

Usage:
======
    from pinboard.shared.schemas.user import UserCreate, AuthResponse
    from pinboard.shared.schemas.common import PaginatedResponse, ErrorResponse
"""

from pinboard.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    PaginationMeta,
    PaginatedResponse,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from pinboard.shared.schemas.user import (
    UserBase,
    UserCreate,
    UserLogin,
    UserUpdate,
    UserResponse,
    UserDetailResponse,
    AuthResponse,
    FollowResponse,
)
from pinboard.shared.schemas.comment import (
    CommentCreate,
    CommentUpdate,
    CommentResponse,
)
from pinboard.shared.schemas.pin import (
    MediaFile,
    PinCreate,
    PinUpdate,
    PinResponse,
    PinDetailResponse,
    LikeResponse,
    SavePinRequest,
    SaveResponse,
)
from pinboard.shared.schemas.board import (
    BoardCreate,
    BoardUpdate,
    BoardResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "UserDetailResponse",
    "AuthResponse",
    "FollowResponse",
    # Comment
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    # Pin
    "MediaFile",
    "PinCreate",
    "PinUpdate",
    "PinResponse",
    "PinDetailResponse",
    "LikeResponse",
    "SavePinRequest",
    "SaveResponse",
    # Board
    "BoardCreate",
    "BoardUpdate",
    "BoardResponse",
]
