"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    PinboardException (base)
       │
       ├── AuthenticationError (401)    ← Missing/invalid caller identity
       ├── AuthorizationError (403)     ← Caller lacks permission on an existing target
       ├── NotFoundError (404)          ← Referenced entity absent
       │      ├── UserNotFoundError
       │      ├── PinNotFoundError
       │      ├── BoardNotFoundError
       │      └── CommentNotFoundError
       ├── ValidationError (400)        ← Field constraints violated
       ├── InvalidOperationError (400)  ← Semantically nonsensical request
       └── ConflictError (409)          ← Would duplicate existing state
              └── DuplicateResourceError

Usage:
======
    from pinboard.shared.core.exceptions import PinNotFoundError, ValidationError

    raise PinNotFoundError(str(pin_id))
    # {"error": {"code": "NOT_FOUND", "message": "Pin with id 'abc' not found"}}

    raise ValidationError("Invalid field values", fields=["title"])
    # {"error": {"code": "VALIDATION_ERROR", ..., "details": {"fields": ["title"]}}}
"""

from typing import Any, Optional


class PinboardException(Exception):
    """
    Base exception for all Pinboard application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(PinboardException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - No caller identity was supplied
    - Token expired or malformed
    - The identity does not resolve to an existing user
    - Login credentials are wrong
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(PinboardException):
    """
    Authorization failed error (403 Forbidden).

    Raised when the caller is authenticated and the target exists,
    but the caller may not read or change it (secret board, not the owner).
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(PinboardException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Board", board_id)
        # Message: "Board with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class PinNotFoundError(NotFoundError):
    """Pin not found error."""

    def __init__(self, pin_id: str) -> None:
        super().__init__(resource="Pin", resource_id=pin_id)


class BoardNotFoundError(NotFoundError):
    """Board not found error."""

    def __init__(self, board_id: str) -> None:
        super().__init__(resource="Board", resource_id=board_id)


class CommentNotFoundError(NotFoundError):
    """Comment not found error."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(resource="Comment", resource_id=comment_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION, INVALID OPERATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(PinboardException):
    """
    Validation error (400 Bad Request).

    Carries the list of offending field names in details["fields"].
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = details or {}
        extra_details["fields"] = list(fields or [])
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=extra_details,
        )

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return self.details["fields"]


class InvalidOperationError(PinboardException):
    """
    Invalid operation error (400 Bad Request).

    Raised when a request is well-formed but makes no sense in the
    current state: following yourself, saving to a board you cannot
    add to, replying to a comment of another pin.
    """

    def __init__(
        self,
        message: str = "Invalid operation",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_OPERATION",
            details=details,
        )


class ConflictError(PinboardException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("You have already saved this pin")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Raised when a link row (follow, like, save, board entry) already exists.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
