# ==============================================================================
# MASTER DATA ENDPOINTS - Shared CRUD Routes
# ==============================================================================
# Registers the create/list/statistics/get/update/delete routes on a
# per-kind router. Annotations here close over the kind's schemas, so
# this module keeps them evaluated eagerly.
# ==============================================================================

from typing import Annotated, Any, Callable, Type

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from realty_admin.api.dependencies import CurrentUserID, get_current_user_id
from realty_admin.core.constants import SuccessMessages
from realty_admin.schemas.base import APIResponse
from realty_admin.schemas.query import MasterPage, MasterQuery


def master_router(prefix: str, tag: str) -> APIRouter:
    """Router for one kind under ``/masters``; every route requires a bearer token."""
    return APIRouter(
        prefix=f"/masters/{prefix}",
        tags=[tag],
        dependencies=[Depends(get_current_user_id)],
    )


def register_master_routes(
    router: APIRouter,
    *,
    service_dep: Callable[..., Any],
    label: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    record_schema: Type[BaseModel],
    query_schema: Type[MasterQuery],
    statistics_schema: Type[BaseModel],
) -> APIRouter:
    """
    Add the shared CRUD routes to ``router``.

    Call this after the kind-specific routes so that fixed paths such as
    ``/popular`` are matched before ``/{record_id}``.

    Args:
        router: Kind router built by master_router()
        service_dep: Dependency returning the kind's accessor
        label: Plural display name used in summaries ("amenities")
        create_schema: Request body for POST
        update_schema: Request body for PATCH
        record_schema: Response item schema
        query_schema: Query parameter model for GET ""
        statistics_schema: Response schema for GET /statistics

    Returns:
        The same router
    """
    ServiceDep = Annotated[Any, Depends(service_dep)]

    @router.post(
        "",
        response_model=APIResponse[record_schema],
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label}",
    )
    async def create_record(
        schema: create_schema,
        user_id: CurrentUserID,
        service: ServiceDep,
    ):
        record = await service.engine.create(schema, actor_id=user_id)
        return APIResponse.ok(data=record, message=SuccessMessages.CREATED)

    @router.get(
        "",
        response_model=APIResponse[MasterPage[record_schema]],
        summary=f"List {label}",
        description="Paged, filterable list. Archived records are hidden "
                    "unless requested through `status`.",
    )
    async def list_records(
        query: Annotated[query_schema, Query()],
        service: ServiceDep,
    ):
        page = await service.engine.find_all(query)
        return APIResponse.ok(data=page)

    @router.get(
        "/statistics",
        response_model=APIResponse[statistics_schema],
        summary=f"{label.capitalize()} statistics",
    )
    async def get_statistics(service: ServiceDep):
        return APIResponse.ok(data=await service.get_statistics())

    @router.get(
        "/{record_id}",
        response_model=APIResponse[record_schema],
        summary=f"Get one of the {label}",
    )
    async def get_record(record_id: str, service: ServiceDep):
        return APIResponse.ok(data=await service.engine.find_by_id(record_id))

    @router.patch(
        "/{record_id}",
        response_model=APIResponse[record_schema],
        summary=f"Update one of the {label}",
    )
    async def update_record(
        record_id: str,
        schema: update_schema,
        user_id: CurrentUserID,
        service: ServiceDep,
    ):
        record = await service.engine.update(record_id, schema, actor_id=user_id)
        return APIResponse.ok(data=record, message=SuccessMessages.UPDATED)

    @router.delete(
        "/{record_id}",
        response_model=APIResponse[record_schema],
        summary=f"Delete one of the {label}",
        description="Refused while child records or projects reference the record.",
    )
    async def delete_record(record_id: str, service: ServiceDep):
        record = await service.engine.remove(record_id)
        return APIResponse.ok(data=record, message=SuccessMessages.DELETED)

    return router
