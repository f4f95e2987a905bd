# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Pydantic Schemas
================

Request/Response validation schemas for API endpoints:
- Base: Common envelope, pagination and health schemas
- User: Authentication schemas
- Master: Fields, record and statistics shared by every master kind
- Query: List criteria and paged results
- Amenity, PropertyType, Room, City, Location: Per-kind schemas
"""

from realty_admin.schemas.base import (
    BaseSchema,
    TimestampSchema,
    PaginationMeta,
    APIResponse,
    HealthResponse,
)
from realty_admin.schemas.user import (
    UserCreate,
    UserResponse,
    UserLogin,
    TokenResponse,
    LoginResponse,
)
from realty_admin.schemas.master import (
    MasterType,
    MasterStatus,
    MasterBase,
    MasterRecord,
    MasterStatistics,
)
from realty_admin.schemas.query import (
    SortDirection,
    MasterQuery,
    MasterPage,
)
from realty_admin.schemas.amenity import (
    AmenityCreate,
    AmenityUpdate,
    AmenityRecord,
    AmenityQuery,
    AmenityStatistics,
)
from realty_admin.schemas.property_type import (
    PropertyTypeCreate,
    PropertyTypeUpdate,
    PropertyTypeRecord,
    PropertyTypeQuery,
    PropertyTypeStatistics,
)
from realty_admin.schemas.room import (
    WashroomCreate,
    WashroomUpdate,
    WashroomRecord,
    BedroomCreate,
    BedroomUpdate,
    BedroomRecord,
    BathroomCreate,
    BathroomUpdate,
    BathroomRecord,
    RoomQuery,
    RoomConfigurationStatistics,
)
from realty_admin.schemas.city import (
    CityCreate,
    CityUpdate,
    CityRecord,
    CityQuery,
    CityStatistics,
)
from realty_admin.schemas.location import (
    LocationCreate,
    LocationUpdate,
    LocationRecord,
    LocationQuery,
    LocationStatistics,
)

__all__ = [
    # Base
    "BaseSchema",
    "TimestampSchema",
    "PaginationMeta",
    "APIResponse",
    "HealthResponse",
    # User
    "UserCreate",
    "UserResponse",
    "UserLogin",
    "TokenResponse",
    "LoginResponse",
    # Master
    "MasterType",
    "MasterStatus",
    "MasterBase",
    "MasterRecord",
    "MasterStatistics",
    # Query
    "SortDirection",
    "MasterQuery",
    "MasterPage",
    # Amenity
    "AmenityCreate",
    "AmenityUpdate",
    "AmenityRecord",
    "AmenityQuery",
    "AmenityStatistics",
    # Property type
    "PropertyTypeCreate",
    "PropertyTypeUpdate",
    "PropertyTypeRecord",
    "PropertyTypeQuery",
    "PropertyTypeStatistics",
    # Room configurations
    "WashroomCreate",
    "WashroomUpdate",
    "WashroomRecord",
    "BedroomCreate",
    "BedroomUpdate",
    "BedroomRecord",
    "BathroomCreate",
    "BathroomUpdate",
    "BathroomRecord",
    "RoomQuery",
    "RoomConfigurationStatistics",
    # City
    "CityCreate",
    "CityUpdate",
    "CityRecord",
    "CityQuery",
    "CityStatistics",
    # Location
    "LocationCreate",
    "LocationUpdate",
    "LocationRecord",
    "LocationQuery",
    "LocationStatistics",
]
