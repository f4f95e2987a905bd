# ==============================================================================
# LOCATION SCHEMAS
# ==============================================================================
# Request/Response schemas for locations; every location sits under a city
# ==============================================================================

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, computed_field, field_validator

from realty_admin.schemas.base import BaseSchema
from realty_admin.schemas.city import validate_coordinates
from realty_admin.schemas.master import (
    MasterBase,
    MasterRecord,
    MasterStatistics,
    ParentAliasMixin,
    partial_model,
)
from realty_admin.schemas.query import MasterQuery


class LocationType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    MIXED = "mixed"
    INDUSTRIAL = "industrial"
    IT_HUB = "it_hub"


class LocationCategory(str, Enum):
    PRIME = "prime"
    PREMIUM = "premium"
    MID_RANGE = "mid_range"
    AFFORDABLE = "affordable"
    BUDGET = "budget"


class Connectivity(BaseSchema):
    nearest_metro_station: Optional[str] = None
    metro_distance: Optional[float] = Field(None, ge=0)
    nearest_railway_station: Optional[str] = None
    railway_distance: Optional[float] = Field(None, ge=0)
    nearest_airport: Optional[str] = None
    airport_distance: Optional[float] = Field(None, ge=0)
    major_roads: List[str] = Field(default_factory=list)


class LocationFields(BaseSchema):
    location_type: LocationType = LocationType.RESIDENTIAL
    location_category: LocationCategory = LocationCategory.MID_RANGE
    area: Optional[str] = Field(None, max_length=100, examples=["Linking Road"])
    pincode: Optional[str] = Field(None, pattern=r"^\d{6}$")
    coordinates: Optional[List[float]] = Field(None, description="[longitude, latitude]")
    landmarks: List[str] = Field(default_factory=list)
    connectivity: Optional[Connectivity] = None

    @field_validator("coordinates")
    @classmethod
    def check_coordinates(cls, v):
        return validate_coordinates(v)


class LocationCreate(ParentAliasMixin, MasterBase, LocationFields):
    """Schema for creating a location; ``city_id`` may be sent instead of ``parent_id``."""


LocationUpdate = partial_model(LocationCreate, "LocationUpdate", base=ParentAliasMixin)


class LocationRecord(MasterRecord, LocationFields):
    """Stored location."""

    @computed_field
    @property
    def city_id(self) -> Optional[str]:
        return self.parent_id


class LocationQuery(MasterQuery):
    """List criteria for locations; ``city_id`` scopes to one city."""

    city_id: Optional[str] = Field(None, description="Alias of parent_id")
    location_type: Optional[LocationType] = None
    location_category: Optional[LocationCategory] = None
    pincode: Optional[str] = None


class LocationStatistics(MasterStatistics):
    by_location_type: Dict[str, int] = Field(default_factory=dict)
    by_location_category: Dict[str, int] = Field(default_factory=dict)
    by_city: Dict[str, int] = Field(default_factory=dict)
