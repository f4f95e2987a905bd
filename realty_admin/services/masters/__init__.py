# ==============================================================================
# MASTER DATA SERVICES PACKAGE
# ==============================================================================

"""
Master Data Accessors
=====================

One module per master kind. Each exposes its ``*_PROFILE`` and an
accessor class holding a ``MasterDataEngine`` in ``self.engine``.
"""

from realty_admin.services.masters.amenities import AMENITY_PROFILE, AmenityService
from realty_admin.services.masters.cities import CITY_PROFILE, CityService
from realty_admin.services.masters.locations import LOCATION_PROFILE, LocationService
from realty_admin.services.masters.property_types import (
    PROPERTY_TYPE_PROFILE,
    PropertyTypeService,
)
from realty_admin.services.masters.rooms import (
    BATHROOM_PROFILE,
    BEDROOM_PROFILE,
    WASHROOM_PROFILE,
    RoomConfigurationService,
    bathroom_service,
    bedroom_service,
    washroom_service,
)

__all__ = [
    "AMENITY_PROFILE",
    "AmenityService",
    "CITY_PROFILE",
    "CityService",
    "LOCATION_PROFILE",
    "LocationService",
    "PROPERTY_TYPE_PROFILE",
    "PropertyTypeService",
    "WASHROOM_PROFILE",
    "BEDROOM_PROFILE",
    "BATHROOM_PROFILE",
    "RoomConfigurationService",
    "washroom_service",
    "bedroom_service",
    "bathroom_service",
]
