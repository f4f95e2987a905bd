# ==============================================================================
# PROPERTY TYPE SERVICE
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List

from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.schemas.master import MasterType
from realty_admin.schemas.property_type import (
    PropertyTypeCategory,
    PropertyTypeCreate,
    PropertyTypeQuery,
    PropertyTypeRecord,
    PropertyTypeStatistics,
)
from realty_admin.services.master_engine import (
    MasterDataEngine,
    MasterProfile,
    referenced_by,
)


def property_type_filters(query: PropertyTypeQuery) -> Dict[str, Any]:
    if query.category:
        return {"category": query.category}
    return {}


PROPERTY_TYPE_PROFILE = MasterProfile(
    master_type=MasterType.PROPERTY_TYPE,
    label="Property type",
    create_schema=PropertyTypeCreate,
    record_schema=PropertyTypeRecord,
    searchable_fields=("name", "description", "code", "features", "suitable_for"),
    sortable_fields=(
        "name", "code", "sort_order", "status", "created_at", "updated_at",
        "category", "popularity_rating",
    ),
    query_schema=PropertyTypeQuery,
    extra_filters=property_type_filters,
    usage_checks=(referenced_by("property_types", "projects"),),
    category_field="category",
)


class PropertyTypeService:
    """Property type accessor composed over the generic engine."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self.engine = MasterDataEngine(adapter, PROPERTY_TYPE_PROFILE)

    async def find_by_category(
        self, category: PropertyTypeCategory
    ) -> List[PropertyTypeRecord]:
        return await self.engine.find_by_field(
            "category", PropertyTypeCategory(category).value
        )

    async def find_residential(self) -> List[PropertyTypeRecord]:
        return await self.find_by_category(PropertyTypeCategory.RESIDENTIAL)

    async def find_commercial(self) -> List[PropertyTypeRecord]:
        return await self.find_by_category(PropertyTypeCategory.COMMERCIAL)

    async def get_statistics(self) -> PropertyTypeStatistics:
        engine = self.engine
        return PropertyTypeStatistics(
            **await engine.base_statistics(),
            by_popularity_rating=await engine.count_by(
                "popularity_rating", prefix="rating_"
            ),
            by_suitability=await engine.count_by("suitable_for", unwind=True),
        )
