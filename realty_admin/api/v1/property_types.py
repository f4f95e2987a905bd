# ==============================================================================
# PROPERTY TYPE ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from realty_admin.api.dependencies import PropertyTypeServiceDep, get_property_type_service
from realty_admin.api.v1.masters import master_router, register_master_routes
from realty_admin.schemas.base import APIResponse
from realty_admin.schemas.property_type import (
    PropertyTypeCategory,
    PropertyTypeCreate,
    PropertyTypeQuery,
    PropertyTypeRecord,
    PropertyTypeStatistics,
    PropertyTypeUpdate,
)

router = master_router("property-types", "Property Types")


@router.get(
    "/residential",
    response_model=APIResponse[List[PropertyTypeRecord]],
    summary="Residential property types",
)
async def residential_property_types(
    service: PropertyTypeServiceDep,
) -> APIResponse[List[PropertyTypeRecord]]:
    return APIResponse.ok(data=await service.find_residential())


@router.get(
    "/commercial",
    response_model=APIResponse[List[PropertyTypeRecord]],
    summary="Commercial property types",
)
async def commercial_property_types(
    service: PropertyTypeServiceDep,
) -> APIResponse[List[PropertyTypeRecord]]:
    return APIResponse.ok(data=await service.find_commercial())


@router.get(
    "/category/{category}",
    response_model=APIResponse[List[PropertyTypeRecord]],
    summary="Property types by category",
)
async def property_types_by_category(
    category: PropertyTypeCategory,
    service: PropertyTypeServiceDep,
) -> APIResponse[List[PropertyTypeRecord]]:
    return APIResponse.ok(data=await service.find_by_category(category))


register_master_routes(
    router,
    service_dep=get_property_type_service,
    label="property types",
    create_schema=PropertyTypeCreate,
    update_schema=PropertyTypeUpdate,
    record_schema=PropertyTypeRecord,
    query_schema=PropertyTypeQuery,
    statistics_schema=PropertyTypeStatistics,
)
