# ==============================================================================
# AMENITY ENDPOINTS
# ==============================================================================
# Amenity-specific lookups plus the shared master data routes
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import Query

from realty_admin.api.dependencies import AmenityServiceDep, get_amenity_service
from realty_admin.api.v1.masters import master_router, register_master_routes
from realty_admin.core.constants import MasterConstants
from realty_admin.schemas.amenity import (
    AmenityCategory,
    AmenityCreate,
    AmenityQuery,
    AmenityRecord,
    AmenityStatistics,
    AmenityUpdate,
    AvailabilityFlag,
)
from realty_admin.schemas.base import APIResponse

router = master_router("amenities", "Amenities")


@router.get(
    "/popular",
    response_model=APIResponse[List[AmenityRecord]],
    summary="Popular amenities",
)
async def popular_amenities(
    service: AmenityServiceDep,
    limit: int = Query(MasterConstants.DEFAULT_POPULAR_LIMIT, ge=1, le=100),
) -> APIResponse[List[AmenityRecord]]:
    return APIResponse.ok(data=await service.find_popular(limit))


@router.get(
    "/tags",
    response_model=APIResponse[List[AmenityRecord]],
    summary="Amenities by tags",
    description="Amenities carrying any of the given tags (`?tags=a&tags=b`).",
)
async def amenities_by_tags(
    service: AmenityServiceDep,
    tags: List[str] = Query(..., min_length=1),
) -> APIResponse[List[AmenityRecord]]:
    return APIResponse.ok(data=await service.find_by_tags(tags))


@router.get(
    "/category/{category}",
    response_model=APIResponse[List[AmenityRecord]],
    summary="Amenities by category",
)
async def amenities_by_category(
    category: AmenityCategory,
    service: AmenityServiceDep,
) -> APIResponse[List[AmenityRecord]]:
    return APIResponse.ok(data=await service.find_by_category(category))


@router.get(
    "/importance/{level}",
    response_model=APIResponse[List[AmenityRecord]],
    summary="Amenities by importance level",
)
async def amenities_by_importance(
    level: int,
    service: AmenityServiceDep,
) -> APIResponse[List[AmenityRecord]]:
    return APIResponse.ok(data=await service.find_by_importance(level))


@router.get(
    "/availability/{flag}",
    response_model=APIResponse[List[AmenityRecord]],
    summary="Amenities by availability",
    description="Active amenities flagged residential, commercial, luxury or basic.",
)
async def amenities_by_availability(
    flag: AvailabilityFlag,
    service: AmenityServiceDep,
) -> APIResponse[List[AmenityRecord]]:
    return APIResponse.ok(data=await service.find_by_availability(flag))


register_master_routes(
    router,
    service_dep=get_amenity_service,
    label="amenities",
    create_schema=AmenityCreate,
    update_schema=AmenityUpdate,
    record_schema=AmenityRecord,
    query_schema=AmenityQuery,
    statistics_schema=AmenityStatistics,
)
