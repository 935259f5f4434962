"""
API Handlers

Route handlers for the Pinboard API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from pinboard.api.handlers import (
    auth_handler,
    board_handler,
    comment_handler,
    health_handler,
    pin_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "board_handler",
    "comment_handler",
    "health_handler",
    "pin_handler",
    "user_handler",
]
