# ==============================================================================
# PROPERTY TYPE SCHEMAS
# ==============================================================================
# Request/Response schemas for property type master records
# ==============================================================================

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, model_validator

from realty_admin.schemas.base import BaseSchema
from realty_admin.schemas.master import (
    MasterBase,
    MasterRecord,
    MasterStatistics,
    partial_model,
)
from realty_admin.schemas.query import MasterQuery


class PropertyTypeCategory(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    MIXED_USE = "mixed_use"
    INDUSTRIAL = "industrial"
    AGRICULTURAL = "agricultural"
    INSTITUTIONAL = "institutional"


class AreaRange(BaseSchema):
    """Typical carpet area range."""

    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)
    unit: str = Field("sqft", max_length=10)

    @model_validator(mode="after")
    def check_bounds(self) -> "AreaRange":
        if self.max < self.min:
            raise ValueError("max must be greater than or equal to min")
        return self


class PropertyTypeFields(BaseSchema):
    category: PropertyTypeCategory = Field(..., description="Property type category")
    features: List[str] = Field(default_factory=list)
    suitable_for: List[str] = Field(
        default_factory=list,
        examples=[["families", "investors"]],
    )
    target_audience: List[str] = Field(default_factory=list)
    popularity_rating: int = Field(3, ge=1, le=5)
    typical_area_range: Optional[AreaRange] = None


class PropertyTypeCreate(MasterBase, PropertyTypeFields):
    """Schema for creating a property type."""


PropertyTypeUpdate = partial_model(PropertyTypeCreate, "PropertyTypeUpdate")


class PropertyTypeRecord(MasterRecord, PropertyTypeFields):
    """Stored property type."""


class PropertyTypeQuery(MasterQuery):
    category: Optional[PropertyTypeCategory] = None


class PropertyTypeStatistics(MasterStatistics):
    by_popularity_rating: Dict[str, int] = Field(default_factory=dict)
    by_suitability: Dict[str, int] = Field(default_factory=dict)
