# ==============================================================================
# USER SERVICE - Admin Accounts
# ==============================================================================
# Accounts live in the ``users`` collection with a bcrypt hash in place of
# the password. Emails are stored lower-cased and are unique.
# ==============================================================================

from __future__ import annotations

import logging

from pymongo import ASCENDING

from realty_admin.core.constants import DatabaseConstants, ErrorMessages
from realty_admin.core.exceptions import AlreadyExistsError, AuthenticationError, NotFoundError
from realty_admin.core.security import create_token_pair, hash_password, verify_password
from realty_admin.core.settings import settings
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.schemas.user import LoginResponse, TokenResponse, UserCreate, UserResponse
from realty_admin.utils.helpers import utc_now

logger = logging.getLogger(__name__)

EMAIL_INDEX = "uniq_user_email"


class UserService:
    collection = DatabaseConstants.USERS_COLLECTION

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self._adapter = adapter

    async def ensure_indexes(self) -> None:
        await self._adapter.create_index(
            self.collection, [("email", ASCENDING)], name=EMAIL_INDEX, unique=True
        )

    async def register(self, schema: UserCreate) -> UserResponse:
        """
        Store a new active admin.

        Raises:
            AlreadyExistsError: The email is taken, whatever its case
        """
        email = schema.email.lower()
        if await self._adapter.exists(self.collection, {"email": email}):
            raise AlreadyExistsError(ErrorMessages.EMAIL_TAKEN, resource_type="user")

        now = utc_now()
        document = {
            **schema.model_dump(exclude={"password"}),
            "email": email,
            "hashed_password": hash_password(schema.password),
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        }
        created = await self._adapter.create(self.collection, document)
        logger.info(f"Admin registered: {created['id']}")
        return UserResponse.model_validate(created)

    async def authenticate(self, email: str, password: str) -> LoginResponse:
        """
        Check credentials and issue an access/refresh token pair.

        Unknown email and wrong password produce the same error.

        Raises:
            AuthenticationError: Bad credentials or deactivated account
        """
        user = await self._adapter.find_one(self.collection, {"email": email.lower()})
        hashed = user.get("hashed_password") if user else None
        if not hashed or not verify_password(password, hashed):
            logger.warning(f"Rejected login for {email}")
            raise AuthenticationError(ErrorMessages.INVALID_CREDENTIALS)
        if not user.get("is_active", True):
            raise AuthenticationError(ErrorMessages.INACTIVE_USER)

        tokens = TokenResponse(
            **create_token_pair(user["id"]),
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )
        return LoginResponse(user=UserResponse.model_validate(user), tokens=tokens)

    async def get_by_id(self, user_id: str) -> UserResponse:
        user = await self._adapter.get_by_id(self.collection, user_id)
        if user is None:
            raise NotFoundError(ErrorMessages.USER_NOT_FOUND, resource_type="user", resource_id=user_id)
        return UserResponse.model_validate(user)
