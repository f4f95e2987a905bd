# ==============================================================================
# ROOM CONFIGURATION SCHEMAS - Washrooms, Bedrooms, Bathrooms
# ==============================================================================
# The three numeric configuration kinds share one shape: a count with a
# unit, a kind-specific type field and a typical area
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


class WashroomType(str, Enum):
    ATTACHED = "attached"
    COMMON = "common"
    POWDER_ROOM = "powder_room"
    MASTER_BATHROOM = "master_bathroom"
    GUEST_BATHROOM = "guest_bathroom"


class BedroomType(str, Enum):
    STUDIO = "studio"
    ONE_BHK = "1bhk"
    TWO_BHK = "2bhk"
    THREE_BHK = "3bhk"
    FOUR_BHK = "4bhk"
    FIVE_BHK = "5bhk"
    PENTHOUSE = "penthouse"


class BathroomType(str, Enum):
    ATTACHED = "attached"
    COMMON = "common"
    SHARED = "shared"


class TypicalArea(BaseSchema):
    min: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)
    unit: str = Field("sqft", max_length=10)


class WashroomSpecifications(BaseSchema):
    has_shower: bool = False
    has_bathtub: bool = False
    has_geyser: bool = False
    has_exhaust_fan: bool = False
    has_window: bool = False
    fittings_quality: Optional[str] = Field(None, max_length=50)


class RoomFields(BaseSchema):
    """Fields shared by the numeric configuration kinds."""

    numeric_value: float = Field(..., ge=0, description="Count, e.g. 2 for 2 BHK")
    features: List[str] = Field(default_factory=list)
    typical_area: Optional[TypicalArea] = None
    popularity_rating: int = Field(3, ge=1, le=5)


# ==============================================================================
# WASHROOMS
# ==============================================================================

class WashroomFields(RoomFields):
    unit: str = Field("Washroom", max_length=20)
    washroom_type: Optional[WashroomType] = None
    specifications: Optional[WashroomSpecifications] = None


class WashroomCreate(MasterBase, WashroomFields):
    """Schema for creating a washroom configuration."""


WashroomUpdate = partial_model(WashroomCreate, "WashroomUpdate")


class WashroomRecord(MasterRecord, WashroomFields):
    """Stored washroom configuration."""


# ==============================================================================
# BEDROOMS
# ==============================================================================

class BedroomFields(RoomFields):
    unit: str = Field("BHK", max_length=20)
    room_type: Optional[BedroomType] = None


class BedroomCreate(MasterBase, BedroomFields):
    """Schema for creating a bedroom configuration."""


BedroomUpdate = partial_model(BedroomCreate, "BedroomUpdate")


class BedroomRecord(MasterRecord, BedroomFields):
    """Stored bedroom configuration."""


# ==============================================================================
# BATHROOMS
# ==============================================================================

class BathroomFields(RoomFields):
    unit: str = Field("Bathroom", max_length=20)
    bathroom_type: Optional[BathroomType] = None


class BathroomCreate(MasterBase, BathroomFields):
    """Schema for creating a bathroom configuration."""


BathroomUpdate = partial_model(BathroomCreate, "BathroomUpdate")


class BathroomRecord(MasterRecord, BathroomFields):
    """Stored bathroom configuration."""


# ==============================================================================
# QUERY & STATISTICS
# ==============================================================================

class RoomQuery(MasterQuery):
    """List criteria for the numeric configuration kinds."""

    min_value: Optional[float] = Field(None, ge=0)
    max_value: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    type: Optional[str] = Field(
        None,
        description="Value of the kind's type field (washroom_type, room_type, ...)",
    )

    @model_validator(mode="after")
    def check_range(self) -> "RoomQuery":
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.max_value < self.min_value
        ):
            raise ValueError("max_value must be greater than or equal to min_value")
        return self


class RoomConfigurationStatistics(MasterStatistics):
    by_type: Dict[str, int] = Field(default_factory=dict)
    by_popularity_rating: Dict[str, int] = Field(default_factory=dict)
