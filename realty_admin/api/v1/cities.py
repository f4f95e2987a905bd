# ==============================================================================
# CITY ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import Query

from realty_admin.api.dependencies import CityServiceDep, get_city_service
from realty_admin.api.v1.masters import master_router, register_master_routes
from realty_admin.core.constants import MasterConstants
from realty_admin.schemas.base import APIResponse
from realty_admin.schemas.city import (
    CityCreate,
    CityQuery,
    CityRecord,
    CityStatistics,
    CityUpdate,
)

router = master_router("cities", "Cities")


@router.get(
    "/popular",
    response_model=APIResponse[List[CityRecord]],
    summary="Popular cities",
)
async def popular_cities(
    service: CityServiceDep,
    limit: int = Query(MasterConstants.DEFAULT_POPULAR_LIMIT, ge=1, le=100),
) -> APIResponse[List[CityRecord]]:
    return APIResponse.ok(data=await service.find_popular(limit))


@router.get(
    "/state/{state}",
    response_model=APIResponse[List[CityRecord]],
    summary="Cities in a state",
)
async def cities_by_state(
    state: str,
    service: CityServiceDep,
) -> APIResponse[List[CityRecord]]:
    return APIResponse.ok(data=await service.find_by_state(state))


@router.get(
    "/country/{country}",
    response_model=APIResponse[List[CityRecord]],
    summary="Cities in a country",
)
async def cities_by_country(
    country: str,
    service: CityServiceDep,
) -> APIResponse[List[CityRecord]]:
    return APIResponse.ok(data=await service.find_by_country(country))


register_master_routes(
    router,
    service_dep=get_city_service,
    label="cities",
    create_schema=CityCreate,
    update_schema=CityUpdate,
    record_schema=CityRecord,
    query_schema=CityQuery,
    statistics_schema=CityStatistics,
)
