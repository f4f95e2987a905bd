# ==============================================================================
# SECURITY MODULE - Passwords & Tokens
# ==============================================================================
# bcrypt hashing through passlib and HS256 JWTs through python-jose.
# The token subject is the admin id written to created_by / updated_by.
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

from realty_admin.core.settings import settings
from realty_admin.core.constants import SecurityConstants
from realty_admin.core.exceptions import InvalidTokenError, TokenExpiredError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class TokenType:
    ACCESS = "access"
    REFRESH = "refresh"


def _issue(subject: Any, token_type: str, lifetime: timedelta) -> str:
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": str(subject),
        "type": token_type,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(subject: Any) -> str:
    """
    Short-lived token accepted by every /masters route.

    Example:
        >>> token = create_access_token("admin-1")
        >>> decode_token(token)["sub"]
        'admin-1'
    """
    return _issue(
        subject,
        TokenType.ACCESS,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_refresh_token(subject: Any) -> str:
    return _issue(
        subject,
        TokenType.REFRESH,
        timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
    )


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify the signature and expiry of ``token`` and return its claims.

    Raises:
        TokenExpiredError: The ``exp`` claim is in the past
        InvalidTokenError: Bad signature or not a JWT at all
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError as e:
        raise InvalidTokenError(f"Invalid token: {e}")


def verify_access_token(token: str) -> Dict[str, Any]:
    """Like decode_token, but refresh tokens are rejected."""
    claims = decode_token(token)
    if claims.get("type") != TokenType.ACCESS:
        raise InvalidTokenError("Invalid token type: expected access token")
    return claims


def create_token_pair(subject: Any) -> Dict[str, str]:
    """Access and refresh token issued together on login."""
    return {
        "access_token": create_access_token(subject),
        "refresh_token": create_refresh_token(subject),
        "token_type": SecurityConstants.TOKEN_TYPE_BEARER,
    }
