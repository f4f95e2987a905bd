# ==============================================================================
# AMENITY SERVICE
# ==============================================================================
# Amenity profile plus popularity, tag and availability queries
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List

from pymongo import ASCENDING, DESCENDING

from realty_admin.core.constants import MasterConstants
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.schemas.amenity import (
    AmenityCategory,
    AmenityCreate,
    AmenityQuery,
    AmenityRecord,
    AmenityStatistics,
    AvailabilityFlag,
)
from realty_admin.schemas.master import MasterStatus, MasterType
from realty_admin.services.master_engine import (
    MasterDataEngine,
    MasterProfile,
    referenced_by,
)

POPULARITY_SORT = [
    ("popularity_score", DESCENDING),
    ("sort_order", ASCENDING),
    ("name", ASCENDING),
]


def amenity_filters(query: AmenityQuery) -> Dict[str, Any]:
    filters: Dict[str, Any] = {}
    if query.category:
        filters["category"] = query.category
    if query.tags:
        filters["tags"] = {"$in": [tag.lower() for tag in query.tags]}
    if query.importance_level is not None:
        filters["importance_level"] = query.importance_level
    return filters


AMENITY_PROFILE = MasterProfile(
    master_type=MasterType.AMENITY,
    label="Amenity",
    create_schema=AmenityCreate,
    record_schema=AmenityRecord,
    searchable_fields=("name", "description", "code", "tags", "keywords"),
    sortable_fields=(
        "name", "code", "sort_order", "status", "created_at", "updated_at",
        "category", "importance_level", "popularity_score",
    ),
    query_schema=AmenityQuery,
    extra_filters=amenity_filters,
    usage_checks=(referenced_by("amenities", "projects"),),
    category_field="category",
)


class AmenityService:
    """
    Amenity accessor composed over the generic engine.

    CRUD and paged listing go through ``self.engine``; this class adds the
    amenity-only queries and statistics.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self.engine = MasterDataEngine(adapter, AMENITY_PROFILE)

    async def find_by_category(self, category: AmenityCategory) -> List[AmenityRecord]:
        return await self.engine.find_by_field(
            "category", AmenityCategory(category).value
        )

    async def find_popular(
        self, limit: int = MasterConstants.DEFAULT_POPULAR_LIMIT
    ) -> List[AmenityRecord]:
        """Active popular amenities, highest popularity score first."""
        return await self.engine.find_many(
            {"is_popular": True, "status": MasterStatus.ACTIVE.value},
            sort=POPULARITY_SORT,
            limit=limit,
        )

    async def find_by_importance(self, level: int) -> List[AmenityRecord]:
        return await self.engine.find_by_field("importance_level", level)

    async def find_by_tags(self, tags: List[str]) -> List[AmenityRecord]:
        """Amenities carrying at least one of ``tags``."""
        return await self.engine.find_many(
            {"tags": {"$in": [tag.strip().lower() for tag in tags]}},
            sort=POPULARITY_SORT,
        )

    async def find_by_availability(self, flag: AvailabilityFlag) -> List[AmenityRecord]:
        """
        Active amenities whose ``availability.<flag>`` is set.

        Basic amenities are ordered by importance, the others by popularity.
        """
        flag = AvailabilityFlag(flag)
        if flag is AvailabilityFlag.BASIC:
            sort = [
                ("importance_level", DESCENDING),
                ("sort_order", ASCENDING),
                ("name", ASCENDING),
            ]
        else:
            sort = POPULARITY_SORT
        return await self.engine.find_many(
            {f"availability.{flag.value}": True, "status": MasterStatus.ACTIVE.value},
            sort=sort,
        )

    async def find_residential(self) -> List[AmenityRecord]:
        return await self.find_by_availability(AvailabilityFlag.RESIDENTIAL)

    async def find_commercial(self) -> List[AmenityRecord]:
        return await self.find_by_availability(AvailabilityFlag.COMMERCIAL)

    async def find_luxury(self) -> List[AmenityRecord]:
        return await self.find_by_availability(AvailabilityFlag.LUXURY)

    async def find_basic(self) -> List[AmenityRecord]:
        return await self.find_by_availability(AvailabilityFlag.BASIC)

    async def get_statistics(self) -> AmenityStatistics:
        """Base counts plus importance, availability and popularity breakdowns."""
        engine = self.engine
        top = await engine.find_many(
            {"is_popular": True}, sort=POPULARITY_SORT,
            limit=MasterConstants.TOP_POPULAR_COUNT,
        )
        availability = {
            flag.value: await engine.count(**{f"availability.{flag.value}": True})
            for flag in AvailabilityFlag
        }

        return AmenityStatistics(
            **await engine.base_statistics(),
            by_importance_level=await engine.count_by("importance_level", prefix="level_"),
            availability=availability,
            average_popularity_score=await engine.average("popularity_score") or 0.0,
            top_popular=[record.name for record in top],
        )
