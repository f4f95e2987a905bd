# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

Version 1 API endpoint implementations: authentication and the master
data kinds (amenities, property types, room configurations, cities,
locations).
"""

from realty_admin.api.v1.auth import router as auth_router
from realty_admin.api.v1.amenities import router as amenities_router
from realty_admin.api.v1.property_types import router as property_types_router
from realty_admin.api.v1.rooms import (
    bathrooms_router,
    bedrooms_router,
    washrooms_router,
)
from realty_admin.api.v1.cities import router as cities_router
from realty_admin.api.v1.locations import router as locations_router

__all__ = [
    "auth_router",
    "amenities_router",
    "property_types_router",
    "washrooms_router",
    "bedrooms_router",
    "bathrooms_router",
    "cities_router",
    "locations_router",
]
