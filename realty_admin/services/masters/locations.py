# ==============================================================================
# LOCATION SERVICE
# ==============================================================================
# Locations are children of cities: a parent city is mandatory and a
# city cannot be removed while it still has locations
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List

from realty_admin.core.constants import MasterConstants
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.schemas.location import (
    LocationCreate,
    LocationQuery,
    LocationRecord,
    LocationStatistics,
    LocationType,
)
from realty_admin.schemas.master import MasterStatus, MasterType
from realty_admin.services.master_engine import (
    MasterDataEngine,
    MasterProfile,
    referenced_by,
)


def location_filters(query: LocationQuery) -> Dict[str, Any]:
    filters: Dict[str, Any] = {}
    if query.city_id and not query.parent_id:
        filters["parent_id"] = query.city_id
    if query.location_type:
        filters["location_type"] = query.location_type
    if query.location_category:
        filters["location_category"] = query.location_category
    if query.pincode:
        filters["pincode"] = query.pincode.strip()
    return filters


LOCATION_PROFILE = MasterProfile(
    master_type=MasterType.LOCATION,
    label="Location",
    create_schema=LocationCreate,
    record_schema=LocationRecord,
    searchable_fields=("name", "description", "code", "area", "pincode", "landmarks"),
    sortable_fields=(
        "name", "code", "sort_order", "status", "created_at", "updated_at",
        "location_type", "location_category",
    ),
    query_schema=LocationQuery,
    extra_filters=location_filters,
    usage_checks=(referenced_by("location_id", "projects"),),
    parent_type=MasterType.CITY,
    parent_required=True,
)


class LocationService:
    """Location accessor composed over the generic engine."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self.engine = MasterDataEngine(adapter, LOCATION_PROFILE)

    async def find_by_city(self, city_id: str) -> List[LocationRecord]:
        return await self.engine.find_by_parent(city_id)

    async def find_popular(
        self, limit: int = MasterConstants.DEFAULT_POPULAR_LIMIT
    ) -> List[LocationRecord]:
        return await self.engine.find_many(
            {"is_popular": True, "status": MasterStatus.ACTIVE.value},
            limit=limit,
        )

    async def find_by_type(self, location_type: LocationType) -> List[LocationRecord]:
        return await self.engine.find_by_field(
            "location_type", LocationType(location_type).value
        )

    async def get_statistics(self) -> LocationStatistics:
        engine = self.engine
        return LocationStatistics(
            **await engine.base_statistics(),
            by_location_type=await engine.count_by("location_type"),
            by_location_category=await engine.count_by("location_category"),
            by_city=await engine.count_by("parent_id"),
        )
