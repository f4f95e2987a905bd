# ==============================================================================
# CITY SCHEMAS
# ==============================================================================
# Request/Response schemas for city master records
# ==============================================================================

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field, field_validator

from realty_admin.schemas.base import BaseSchema
from realty_admin.schemas.master import (
    MasterBase,
    MasterRecord,
    MasterStatistics,
    partial_model,
)
from realty_admin.schemas.query import MasterQuery


class PriceRange(BaseSchema):
    min: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)


class RealEstateData(BaseSchema):
    """Market indicators shown next to the city."""

    average_property_price: Optional[float] = Field(None, ge=0)
    price_range: Optional[PriceRange] = None
    growth_rate: Optional[float] = None


def validate_coordinates(v: Optional[List[float]]) -> Optional[List[float]]:
    """Check a ``[longitude, latitude]`` pair."""
    if v is None:
        return v
    if len(v) != 2:
        raise ValueError("coordinates must be [longitude, latitude]")
    lng, lat = v
    if not -180 <= lng <= 180 or not -90 <= lat <= 90:
        raise ValueError("coordinates out of range")
    return v


class CityFields(BaseSchema):
    state: Optional[str] = Field(None, max_length=100, examples=["Maharashtra"])
    country: str = Field("India", max_length=100)
    state_code: Optional[str] = Field(None, max_length=10)
    country_code: Optional[str] = Field(None, max_length=5)
    pin_codes: List[str] = Field(default_factory=list)
    coordinates: Optional[List[float]] = Field(
        None,
        description="[longitude, latitude]",
        examples=[[72.8777, 19.076]],
    )
    timezone: Optional[str] = Field(None, max_length=50, examples=["Asia/Kolkata"])
    population: Optional[int] = Field(None, ge=0)
    real_estate_data: Optional[RealEstateData] = None

    @field_validator("coordinates")
    @classmethod
    def check_coordinates(cls, v):
        return validate_coordinates(v)


class CityCreate(MasterBase, CityFields):
    """Schema for creating a city."""


CityUpdate = partial_model(CityCreate, "CityUpdate")


class CityRecord(MasterRecord, CityFields):
    """Stored city."""


class CityQuery(MasterQuery):
    state: Optional[str] = None
    country: Optional[str] = None
    pin_code: Optional[str] = None


class CityStatistics(MasterStatistics):
    by_state: Dict[str, int] = Field(default_factory=dict)
    by_country: Dict[str, int] = Field(default_factory=dict)
    average_property_price: Optional[float] = None
