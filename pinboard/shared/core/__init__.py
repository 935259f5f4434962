"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from pinboard.shared.core.logging import logger, get_logger
    from pinboard.shared.core.exceptions import PinboardException, NotFoundError

    logger.info("Pin saved", user_id=user_id, pin_id=pin_id)
"""

from pinboard.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from pinboard.shared.core.exceptions import (
    PinboardException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    PinNotFoundError,
    BoardNotFoundError,
    CommentNotFoundError,
    ValidationError,
    InvalidOperationError,
    ConflictError,
    DuplicateResourceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "PinboardException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "PinNotFoundError",
    "BoardNotFoundError",
    "CommentNotFoundError",
    "ValidationError",
    "InvalidOperationError",
    "ConflictError",
    "DuplicateResourceError",
]
