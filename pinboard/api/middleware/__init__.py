"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_context: Request id and path bound to every log line

Usage:
======
    from pinboard.api.middleware import setup_exception_handlers, setup_request_context

    app = FastAPI()
    setup_request_context(app)
    setup_exception_handlers(app)
"""

from pinboard.api.middleware.error_handler import setup_exception_handlers
from pinboard.api.middleware.request_context import REQUEST_ID_HEADER, setup_request_context

__all__ = [
    "setup_exception_handlers",
    "setup_request_context",
    "REQUEST_ID_HEADER",
]
