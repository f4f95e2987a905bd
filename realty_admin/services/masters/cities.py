# ==============================================================================
# CITY SERVICE
# ==============================================================================
# Cities are the roots of the location hierarchy
# ==============================================================================

from __future__ import annotations

import re
from typing import Any, Dict, List

from realty_admin.core.constants import MasterConstants
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.schemas.city import CityCreate, CityQuery, CityRecord, CityStatistics
from realty_admin.schemas.master import MasterStatus, MasterType
from realty_admin.services.master_engine import (
    MasterDataEngine,
    MasterProfile,
    referenced_by,
)


def exact_ignore_case(value: str) -> Dict[str, str]:
    """Case-insensitive whole-value match."""
    return {"$regex": f"^{re.escape(value.strip())}$", "$options": "i"}


def city_filters(query: CityQuery) -> Dict[str, Any]:
    filters: Dict[str, Any] = {}
    if query.state:
        filters["state"] = exact_ignore_case(query.state)
    if query.country:
        filters["country"] = exact_ignore_case(query.country)
    if query.pin_code:
        filters["pin_codes"] = query.pin_code.strip()
    return filters


CITY_PROFILE = MasterProfile(
    master_type=MasterType.CITY,
    label="City",
    create_schema=CityCreate,
    record_schema=CityRecord,
    searchable_fields=("name", "description", "code", "state", "country"),
    sortable_fields=(
        "name", "code", "sort_order", "status", "created_at", "updated_at",
        "state", "country", "population",
    ),
    query_schema=CityQuery,
    extra_filters=city_filters,
    usage_checks=(referenced_by("city_id", "projects"),),
)


class CityService:
    """City accessor composed over the generic engine."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self.engine = MasterDataEngine(adapter, CITY_PROFILE)

    async def find_by_state(self, state: str) -> List[CityRecord]:
        return await self.engine.find_by_field("state", exact_ignore_case(state))

    async def find_by_country(self, country: str) -> List[CityRecord]:
        return await self.engine.find_by_field("country", exact_ignore_case(country))

    async def find_popular(
        self, limit: int = MasterConstants.DEFAULT_POPULAR_LIMIT
    ) -> List[CityRecord]:
        return await self.engine.find_many(
            {"is_popular": True, "status": MasterStatus.ACTIVE.value},
            limit=limit,
        )

    async def get_statistics(self) -> CityStatistics:
        engine = self.engine
        return CityStatistics(
            **await engine.base_statistics(),
            by_state=await engine.count_by("state"),
            by_country=await engine.count_by("country"),
            average_property_price=await engine.average(
                "real_estate_data.average_property_price"
            ),
        )
