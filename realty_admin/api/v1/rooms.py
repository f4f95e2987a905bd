# ==============================================================================
# ROOM CONFIGURATION ENDPOINTS - Washrooms, Bedrooms, Bathrooms
# ==============================================================================
# One router per numeric configuration kind, built from the same factory.
# Annotations close over the kind's schemas and are evaluated eagerly.
# ==============================================================================

from typing import Annotated, Any, Callable, List, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from realty_admin.api.dependencies import (
    get_bathroom_service,
    get_bedroom_service,
    get_washroom_service,
)
from realty_admin.api.v1.masters import master_router, register_master_routes
from realty_admin.schemas.base import APIResponse
from realty_admin.schemas.room import (
    BathroomCreate,
    BathroomRecord,
    BathroomUpdate,
    BedroomCreate,
    BedroomRecord,
    BedroomUpdate,
    RoomConfigurationStatistics,
    RoomQuery,
    WashroomCreate,
    WashroomRecord,
    WashroomUpdate,
)


def room_router(
    prefix: str,
    tag: str,
    service_dep: Callable[..., Any],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    record_schema: Type[BaseModel],
) -> APIRouter:
    router = master_router(prefix, tag)
    ServiceDep = Annotated[Any, Depends(service_dep)]

    @router.get(
        "/type/{type_value}",
        response_model=APIResponse[List[record_schema]],
        summary=f"{tag} by type",
    )
    async def records_by_type(type_value: str, service: ServiceDep):
        return APIResponse.ok(data=await service.find_by_type(type_value))

    @router.get(
        "/value/{numeric_value}",
        response_model=APIResponse[List[record_schema]],
        summary=f"{tag} by count",
    )
    async def records_by_value(numeric_value: float, service: ServiceDep):
        return APIResponse.ok(data=await service.find_by_value(numeric_value))

    return register_master_routes(
        router,
        service_dep=service_dep,
        label=tag.lower(),
        create_schema=create_schema,
        update_schema=update_schema,
        record_schema=record_schema,
        query_schema=RoomQuery,
        statistics_schema=RoomConfigurationStatistics,
    )


washrooms_router = room_router(
    "washrooms", "Washrooms", get_washroom_service,
    WashroomCreate, WashroomUpdate, WashroomRecord,
)
bedrooms_router = room_router(
    "bedrooms", "Bedrooms", get_bedroom_service,
    BedroomCreate, BedroomUpdate, BedroomRecord,
)
bathrooms_router = room_router(
    "bathrooms", "Bathrooms", get_bathroom_service,
    BathroomCreate, BathroomUpdate, BathroomRecord,
)
