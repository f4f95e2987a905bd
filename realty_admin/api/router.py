# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================
# Combines all API version routers
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from realty_admin.core.settings import settings
from realty_admin.api.v1 import (
    auth_router,
    amenities_router,
    property_types_router,
    washrooms_router,
    bedrooms_router,
    bathrooms_router,
    cities_router,
    locations_router,
)

# Create main API router
api_router = APIRouter()

# Include v1 routers with API prefix
for router in (
    auth_router,
    amenities_router,
    property_types_router,
    washrooms_router,
    bedrooms_router,
    bathrooms_router,
    cities_router,
    locations_router,
):
    api_router.include_router(router, prefix=settings.API_V1_PREFIX)
