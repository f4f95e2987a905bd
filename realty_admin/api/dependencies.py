# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# Bearer token -> actor id, factory adapter -> per-request services
# ==============================================================================

from __future__ import annotations

from typing import Annotated, NoReturn, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from realty_admin.core.settings import settings
from realty_admin.core.constants import ErrorMessages
from realty_admin.core.security import verify_access_token
from realty_admin.core.exceptions import AuthenticationError
from realty_admin.database.factory import DatabaseFactory
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.services.masters import (
    AmenityService,
    CityService,
    LocationService,
    PropertyTypeService,
    RoomConfigurationService,
    bathroom_service,
    bedroom_service,
    washroom_service,
)
from realty_admin.services.user_service import UserService

oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_PREFIX}/auth/login",
    auto_error=False,
)


async def get_adapter() -> BaseDatabaseAdapter:
    return DatabaseFactory.get_adapter()


DatabaseDep = Annotated[BaseDatabaseAdapter, Depends(get_adapter)]


# ==============================================================================
# AUTHENTICATION
# ==============================================================================

def _unauthorized(detail: str) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
) -> str:
    """
    Id of the admin behind the bearer access token.

    Services record it as ``created_by`` / ``updated_by``. Missing,
    expired, malformed and refresh tokens all end in a 401.
    """
    if not token:
        _unauthorized(ErrorMessages.UNAUTHORIZED)

    try:
        claims = verify_access_token(token)
    except AuthenticationError as e:
        _unauthorized(e.message)

    subject = claims.get("sub")
    if not subject:
        _unauthorized("Invalid token payload")
    return subject


CurrentUserID = Annotated[str, Depends(get_current_user_id)]


# ==============================================================================
# SERVICES
# ==============================================================================

async def get_user_service(adapter: DatabaseDep) -> UserService:
    return UserService(adapter)


async def get_amenity_service(adapter: DatabaseDep) -> AmenityService:
    return AmenityService(adapter)


async def get_property_type_service(adapter: DatabaseDep) -> PropertyTypeService:
    return PropertyTypeService(adapter)


# Room kinds share one accessor class, configured per master type
async def get_washroom_service(adapter: DatabaseDep) -> RoomConfigurationService:
    return washroom_service(adapter)


async def get_bedroom_service(adapter: DatabaseDep) -> RoomConfigurationService:
    return bedroom_service(adapter)


async def get_bathroom_service(adapter: DatabaseDep) -> RoomConfigurationService:
    return bathroom_service(adapter)


async def get_city_service(adapter: DatabaseDep) -> CityService:
    return CityService(adapter)


async def get_location_service(adapter: DatabaseDep) -> LocationService:
    return LocationService(adapter)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AmenityServiceDep = Annotated[AmenityService, Depends(get_amenity_service)]
PropertyTypeServiceDep = Annotated[PropertyTypeService, Depends(get_property_type_service)]
CityServiceDep = Annotated[CityService, Depends(get_city_service)]
LocationServiceDep = Annotated[LocationService, Depends(get_location_service)]
