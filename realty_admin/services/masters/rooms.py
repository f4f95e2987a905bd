# ==============================================================================
# ROOM CONFIGURATION SERVICES - Washrooms, Bedrooms, Bathrooms
# ==============================================================================
# The numeric configuration kinds differ only in their schemas, unit and
# type field, so they share one accessor class
# ==============================================================================

from __future__ import annotations

from typing import Any, Callable, Dict, List, Type

from pymongo import ASCENDING

from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.schemas.master import MasterBase, MasterRecord, MasterType
from realty_admin.schemas.room import (
    BathroomCreate,
    BathroomRecord,
    BedroomCreate,
    BedroomRecord,
    RoomConfigurationStatistics,
    RoomQuery,
    WashroomCreate,
    WashroomRecord,
)
from realty_admin.services.master_engine import (
    MasterDataEngine,
    MasterProfile,
    referenced_by,
)

NUMERIC_SORT = [("numeric_value", ASCENDING), ("sort_order", ASCENDING), ("name", ASCENDING)]

ROOM_SORTABLE_FIELDS = (
    "name", "code", "sort_order", "status", "created_at", "updated_at",
    "numeric_value", "popularity_rating",
)


def room_filters(type_field: str) -> Callable[[RoomQuery], Dict[str, Any]]:
    """Build the numeric range / unit / type filter for one room kind."""

    def build(query: RoomQuery) -> Dict[str, Any]:
        filters: Dict[str, Any] = {}
        value_range: Dict[str, float] = {}
        if query.min_value is not None:
            value_range["$gte"] = query.min_value
        if query.max_value is not None:
            value_range["$lte"] = query.max_value
        if value_range:
            filters["numeric_value"] = value_range
        if query.unit:
            filters["unit"] = query.unit
        if query.type:
            filters[type_field] = query.type
        return filters

    return build


def room_profile(master_type: MasterType, label: str, type_field: str,
                 create_schema: Type[MasterBase],
                 record_schema: Type[MasterRecord]) -> MasterProfile:
    return MasterProfile(
        master_type=master_type,
        label=label,
        create_schema=create_schema,
        record_schema=record_schema,
        searchable_fields=("name", "description", "code", "unit", "features"),
        sortable_fields=ROOM_SORTABLE_FIELDS,
        default_sort="numeric_value",
        query_schema=RoomQuery,
        extra_filters=room_filters(type_field),
        usage_checks=(referenced_by("configurations", "projects"),),
    )


WASHROOM_PROFILE = room_profile(
    MasterType.WASHROOM, "Washroom", "washroom_type", WashroomCreate, WashroomRecord
)
BEDROOM_PROFILE = room_profile(
    MasterType.BEDROOM, "Bedroom", "room_type", BedroomCreate, BedroomRecord
)
BATHROOM_PROFILE = room_profile(
    MasterType.BATHROOM, "Bathroom", "bathroom_type", BathroomCreate, BathroomRecord
)


class RoomConfigurationService:
    """
    Accessor for one numeric configuration kind.

    Args:
        adapter: Database adapter
        profile: One of the room profiles above
        type_field: Name of the kind's type field (``washroom_type`` ...)
    """

    def __init__(self, adapter: BaseDatabaseAdapter, profile: MasterProfile,
                 type_field: str) -> None:
        self.engine = MasterDataEngine(adapter, profile)
        self.type_field = type_field

    async def find_by_type(self, type_value: str) -> List[MasterRecord]:
        """Records of the given type, smallest numeric value first."""
        return await self.engine.find_by_field(
            self.type_field, type_value, sort=NUMERIC_SORT
        )

    async def find_by_value(self, numeric_value: float) -> List[MasterRecord]:
        return await self.engine.find_by_field(
            "numeric_value", numeric_value, sort=NUMERIC_SORT
        )

    async def get_statistics(self) -> RoomConfigurationStatistics:
        engine = self.engine
        return RoomConfigurationStatistics(
            **await engine.base_statistics(),
            by_type=await engine.count_by(self.type_field),
            by_popularity_rating=await engine.count_by(
                "popularity_rating", prefix="rating_"
            ),
        )


def washroom_service(adapter: BaseDatabaseAdapter) -> RoomConfigurationService:
    return RoomConfigurationService(adapter, WASHROOM_PROFILE, "washroom_type")


def bedroom_service(adapter: BaseDatabaseAdapter) -> RoomConfigurationService:
    return RoomConfigurationService(adapter, BEDROOM_PROFILE, "room_type")


def bathroom_service(adapter: BaseDatabaseAdapter) -> RoomConfigurationService:
    return RoomConfigurationService(adapter, BATHROOM_PROFILE, "bathroom_type")
