"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Pin with id 'abc-123' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. PinboardException subclasses → Use their status_code and to_dict()
2. Request validation errors    → 400 VALIDATION_ERROR, details.fields lists
                                   the offending fields
3. Other exceptions             → 500 with generic message (details hidden)

Usage:
======
    from pinboard.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pinboard.shared.core.exceptions import PinboardException
from pinboard.shared.core.logging import logger


def _field_name(loc: tuple) -> str:
    """("body", "file", "file_id") → "file.file_id"; ("query", "page") → "page"."""
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(PinboardException)
    async def pinboard_exception_handler(
        request: Request,
        exc: PinboardException,
    ) -> JSONResponse:
        """
        Handle Pinboard-specific exceptions.

        All custom exceptions inherit from PinboardException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when the body, query or path doesn't match the schema.
        """
        errors = [
            {"field": _field_name(tuple(error.get("loc", ()))), "message": error.get("msg", "")}
            for error in exc.errors()
        ]
        fields = list(dict.fromkeys(error["field"] for error in errors))

        logger.warning(
            "Validation error",
            fields=fields,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"fields": fields, "errors": errors},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
