# ==============================================================================
# AMENITY SCHEMAS - Project Amenities
# ==============================================================================
# Request/Response schemas for amenity master records
# ==============================================================================

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from realty_admin.schemas.base import BaseSchema
from realty_admin.schemas.master import (
    MasterBase,
    MasterRecord,
    MasterStatistics,
    partial_model,
)
from realty_admin.schemas.query import MasterQuery, split_csv


class AmenityCategory(str, Enum):
    """Amenity grouping used for filters and statistics."""
    BASIC = "basic"
    RECREATIONAL = "recreational"
    SECURITY = "security"
    CONVENIENCE = "convenience"
    WELLNESS = "wellness"
    SPORTS = "sports"
    COMMUNITY = "community"
    PARKING = "parking"
    UTILITIES = "utilities"


class AvailabilityFlag(str, Enum):
    """Keys of the ``availability`` block."""
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    LUXURY = "luxury"
    BASIC = "basic"


class AmenitySpecifications(BaseSchema):
    size: Optional[str] = Field(None, max_length=100, examples=["50m x 25m"])
    capacity: Optional[int] = Field(None, ge=1)
    operating_hours: Optional[str] = Field(None, max_length=50)
    maintenance_fee: Optional[float] = Field(None, ge=0)
    features: List[str] = Field(default_factory=list)


class AmenityAvailability(BaseSchema):
    """Which kinds of project the amenity applies to."""
    residential: bool = True
    commercial: bool = False
    luxury: bool = False
    basic: bool = False


class AmenityFields(BaseSchema):
    """Amenity payload, opaque to the engine."""

    category: AmenityCategory = Field(..., description="Amenity category")
    icon: Optional[str] = Field(None, max_length=50, examples=["swimming-pool"])
    color: Optional[str] = Field(None, max_length=10, examples=["#0066CC"])
    tags: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    specifications: Optional[AmenitySpecifications] = None
    availability: AmenityAvailability = Field(default_factory=AmenityAvailability)
    importance_level: int = Field(3, ge=1, le=5)
    popularity_score: int = Field(0, ge=0, le=100)

    @field_validator("tags", "keywords", mode="before")
    @classmethod
    def lowercase_terms(cls, v):
        if isinstance(v, list):
            return [t.strip().lower() for t in v if isinstance(t, str) and t.strip()]
        return v


class AmenityCreate(MasterBase, AmenityFields):
    """Schema for creating an amenity."""


AmenityUpdate = partial_model(AmenityCreate, "AmenityUpdate")


class AmenityRecord(MasterRecord, AmenityFields):
    """Stored amenity."""


class AmenityQuery(MasterQuery):
    """List criteria for amenities."""

    category: Optional[AmenityCategory] = None
    tags: Optional[List[str]] = Field(
        None,
        description="Match records carrying any of these tags",
    )
    importance_level: Optional[int] = Field(None, ge=1, le=5)

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        return split_csv(v)


class AmenityStatistics(MasterStatistics):
    by_importance_level: Dict[str, int] = Field(default_factory=dict)
    availability: Dict[str, int] = Field(default_factory=dict)
    average_popularity_score: float = 0.0
    top_popular: List[str] = Field(default_factory=list)
