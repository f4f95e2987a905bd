# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Security, Exceptions, Constants, Logging
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- security: JWT authentication and password hashing
- exceptions: Custom exception classes
- constants: Application-wide constants
- logging: Package logger setup
"""

from realty_admin.core.settings import settings, get_settings, Environment
from realty_admin.core.exceptions import (
    AppException,
    DatabaseError,
    NotFoundError,
    AlreadyExistsError,
    BadRequestError,
    ResourceInUseError,
    ValidationError,
    AuthenticationError,
)

__all__ = [
    "settings",
    "get_settings",
    "Environment",
    "AppException",
    "DatabaseError",
    "NotFoundError",
    "AlreadyExistsError",
    "BadRequestError",
    "ResourceInUseError",
    "ValidationError",
    "AuthenticationError",
]
