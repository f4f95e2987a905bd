# ==============================================================================
# LOCATION ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import Query

from realty_admin.api.dependencies import LocationServiceDep, get_location_service
from realty_admin.api.v1.masters import master_router, register_master_routes
from realty_admin.core.constants import MasterConstants
from realty_admin.schemas.base import APIResponse
from realty_admin.schemas.location import (
    LocationCreate,
    LocationQuery,
    LocationRecord,
    LocationStatistics,
    LocationType,
    LocationUpdate,
)

router = master_router("locations", "Locations")


@router.get(
    "/popular",
    response_model=APIResponse[List[LocationRecord]],
    summary="Popular locations",
)
async def popular_locations(
    service: LocationServiceDep,
    limit: int = Query(MasterConstants.DEFAULT_POPULAR_LIMIT, ge=1, le=100),
) -> APIResponse[List[LocationRecord]]:
    return APIResponse.ok(data=await service.find_popular(limit))


@router.get(
    "/city/{city_id}",
    response_model=APIResponse[List[LocationRecord]],
    summary="Locations in a city",
)
async def locations_by_city(
    city_id: str,
    service: LocationServiceDep,
) -> APIResponse[List[LocationRecord]]:
    return APIResponse.ok(data=await service.find_by_city(city_id))


@router.get(
    "/type/{location_type}",
    response_model=APIResponse[List[LocationRecord]],
    summary="Locations by type",
)
async def locations_by_type(
    location_type: LocationType,
    service: LocationServiceDep,
) -> APIResponse[List[LocationRecord]]:
    return APIResponse.ok(data=await service.find_by_type(location_type))


register_master_routes(
    router,
    service_dep=get_location_service,
    label="locations",
    create_schema=LocationCreate,
    update_schema=LocationUpdate,
    record_schema=LocationRecord,
    query_schema=LocationQuery,
    statistics_schema=LocationStatistics,
)
