# ==============================================================================
# APPLICATION CONSTANTS
# ==============================================================================
# Fixed values shared by the API, the engine and the auth layer
# ==============================================================================

from __future__ import annotations

from typing import Final


class APIConstants:
    DEFAULT_PAGE_SIZE: Final[int] = 10
    MAX_PAGE_SIZE: Final[int] = 100
    MIN_PAGE_SIZE: Final[int] = 1

    REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
    RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"


class DatabaseConstants:
    """Collections and index names. All master kinds share one collection."""

    USERS_COLLECTION: Final[str] = "users"
    MASTERS_COLLECTION: Final[str] = "masters"

    MASTER_NAME_INDEX: Final[str] = "uniq_master_type_name"
    MASTER_PARENT_INDEX: Final[str] = "master_type_parent_id"
    MASTER_STATUS_INDEX: Final[str] = "master_type_status"


class MasterConstants:
    NAME_MAX_LENGTH: Final[int] = 100
    DESCRIPTION_MAX_LENGTH: Final[int] = 500
    CODE_MAX_LENGTH: Final[int] = 20
    SORT_ORDER_MAX: Final[int] = 9999

    # Never written by update()
    IMMUTABLE_FIELDS: Final[frozenset] = frozenset(
        {"id", "master_type", "parent_type", "created_at", "created_by"}
    )

    DEFAULT_POPULAR_LIMIT: Final[int] = 10
    # Size of the "top popular" list in statistics
    TOP_POPULAR_COUNT: Final[int] = 5


class SecurityConstants:
    MIN_PASSWORD_LENGTH: Final[int] = 8
    MAX_PASSWORD_LENGTH: Final[int] = 128
    TOKEN_TYPE_BEARER: Final[str] = "bearer"


class ErrorMessages:
    INVALID_CREDENTIALS: Final[str] = "Invalid email or password"
    INACTIVE_USER: Final[str] = "User account is inactive"
    UNAUTHORIZED: Final[str] = "Authentication required"
    USER_NOT_FOUND: Final[str] = "User not found"
    EMAIL_TAKEN: Final[str] = "User with this email already exists"

    INVALID_PARENT: Final[str] = "Invalid parent"
    HAS_CHILDREN: Final[str] = "Cannot delete a record that has child records"
    INVALID_SORT_FIELD: Final[str] = "Unsupported sort field"


class SuccessMessages:
    CREATED: Final[str] = "Resource created successfully"
    UPDATED: Final[str] = "Resource updated successfully"
    DELETED: Final[str] = "Resource deleted successfully"
    LOGIN_SUCCESS: Final[str] = "Login successful"
    USER_REGISTERED: Final[str] = "User registered successfully"
