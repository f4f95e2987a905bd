# ==============================================================================
# USER SCHEMAS - Admin Accounts
# ==============================================================================
# Registration, login and token payloads. Only admins use this API, so
# accounts carry no roles.
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from realty_admin.core.constants import SecurityConstants
from realty_admin.schemas.base import BaseSchema, TimestampSchema

PASSWORD_RULES = (
    (str.isupper, "an uppercase letter"),
    (str.islower, "a lowercase letter"),
    (str.isdigit, "a digit"),
)


class UserCreate(BaseSchema):
    email: EmailStr = Field(..., examples=["admin@example.com"])
    password: str = Field(
        ...,
        min_length=SecurityConstants.MIN_PASSWORD_LENGTH,
        max_length=SecurityConstants.MAX_PASSWORD_LENGTH,
    )
    full_name: Optional[str] = Field(None, max_length=255)

    @field_validator("password")
    @classmethod
    def require_mixed_characters(cls, v: str) -> str:
        for check, what in PASSWORD_RULES:
            if not any(check(c) for c in v):
                raise ValueError(f"Password must contain at least {what}")
        return v


class UserResponse(TimestampSchema):
    """Account as returned by the API; the password hash is never included."""

    id: str
    email: EmailStr
    full_name: Optional[str] = None
    is_active: bool = True


class UserLogin(BaseSchema):
    email: EmailStr
    password: str


class TokenResponse(BaseSchema):
    """Login result. ``expires_in`` is the access token lifetime in seconds."""

    access_token: str
    refresh_token: str
    token_type: str = SecurityConstants.TOKEN_TYPE_BEARER
    expires_in: int


class LoginResponse(BaseSchema):
    user: UserResponse
    tokens: TokenResponse
