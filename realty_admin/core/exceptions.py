# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Every error the service raises on purpose derives from AppException and
# knows the HTTP status and error code it is rendered with.
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional


class AppException(Exception):
    """
    Base class of the service's errors.

    Subclasses set ``status_code``, ``error_code`` and ``default_message``
    at class level; a single handler in main.py turns any of them into the
    error envelope::

        {"success": false, "error": {"code": ..., "message": ..., "details": {...}}}

    Example:
        >>> err = NotFoundError("Amenity not found", resource_type="amenity")
        >>> err.status_code, err.to_dict()["error"]["code"]
        (404, 'NOT_FOUND')
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = dict(details or {})
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error envelope for the JSON response body."""
        error = {"code": self.error_code, "message": self.message, "details": self.details}
        return {"success": False, "error": error}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.error_code}, status={self.status_code})"
        )


# ==============================================================================
# STORAGE
# ==============================================================================

class DatabaseError(AppException):
    """The document store is unreachable or the factory is not initialized."""

    status_code = 503
    error_code = "DATABASE_ERROR"
    default_message = "Database operation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


# ==============================================================================
# RECORDS
# ==============================================================================

class NotFoundError(AppException):
    """
    No record with the given id (malformed ids and other master types included).

    Attributes:
        resource_type: Master type or other resource that was looked up
        resource_id: Id that was asked for
    """

    status_code = 404
    error_code = "NOT_FOUND"
    default_message = "Resource not found"

    def __init__(
        self,
        message: Optional[str] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = str(resource_id)
        super().__init__(message, details=details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class AlreadyExistsError(AppException):
    """A name or code is already taken within its master type (or an email by a user)."""

    status_code = 409
    error_code = "ALREADY_EXISTS"
    default_message = "Resource already exists"

    def __init__(
        self,
        message: Optional[str] = None,
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        extra = dict(details or {})
        if resource_type:
            extra["resource_type"] = resource_type
        super().__init__(message, details=extra)


# ==============================================================================
# REQUESTS
# ==============================================================================

class BadRequestError(AppException):
    """
    The request breaks a master data rule.

    Invalid parents, rejected sort fields, records that fail validation
    after a merge and wrapped storage failures all end up here.
    """

    status_code = 400
    error_code = "BAD_REQUEST"
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class ResourceInUseError(BadRequestError):
    """Delete refused because children or projects still reference the record."""

    error_code = "RESOURCE_IN_USE"
    default_message = "Resource is in use"


class ValidationError(AppException):
    """
    The request body or query string failed schema validation.

    ``errors`` is the list of field problems, each with ``loc``, ``msg``
    and ``type`` keys, and is exposed under ``details.errors``.
    """

    status_code = 422
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message, details={"errors": list(errors or [])})
        self.errors = errors or []


# ==============================================================================
# AUTHENTICATION
# ==============================================================================

class AuthenticationError(AppException):
    status_code = 401
    error_code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details=details)


class TokenExpiredError(AuthenticationError):
    error_code = "TOKEN_EXPIRED"
    default_message = "Token has expired"


class InvalidTokenError(AuthenticationError):
    error_code = "INVALID_TOKEN"
    default_message = "Invalid token"
