# ==============================================================================
# MASTER SCHEMAS - Shared Master Data Record
# ==============================================================================
# Fields common to every master data kind, plus partial-update and
# statistics building blocks reused by the per-kind schemas
# ==============================================================================

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field, create_model, field_validator, model_validator

from realty_admin.core.constants import MasterConstants
from realty_admin.schemas.base import BaseSchema, TimestampSchema
from realty_admin.utils.helpers import collapse_whitespace

ModelT = TypeVar("ModelT", bound=BaseModel)


class MasterType(str, Enum):
    """Kinds of master data sharing the ``masters`` collection."""
    AMENITY = "amenity"
    PROPERTY_TYPE = "property_type"
    WASHROOM = "washroom"
    CITY = "city"
    LOCATION = "location"
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"


class MasterStatus(str, Enum):
    """Record lifecycle status; ``archived`` is the soft-deleted state."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


# ==============================================================================
# INPUT SCHEMAS
# ==============================================================================

class MasterBase(BaseSchema):
    """
    Writable fields shared by all master types.

    ``name`` is trimmed, whitespace-collapsed and title-cased so that
    ``"pool"`` and ``"Pool "`` normalize to the same stored value.
    ``code`` is upper-cased and blank codes are dropped.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=MasterConstants.NAME_MAX_LENGTH,
        description="Display name, unique within its master type",
        examples=["Swimming Pool"],
    )
    description: Optional[str] = Field(
        None,
        max_length=MasterConstants.DESCRIPTION_MAX_LENGTH,
        description="Free-text description",
    )
    code: Optional[str] = Field(
        None,
        max_length=MasterConstants.CODE_MAX_LENGTH,
        description="Short code, unique within its master type",
    )
    status: MasterStatus = Field(
        MasterStatus.ACTIVE,
        description="Lifecycle status",
    )
    sort_order: int = Field(
        0,
        ge=0,
        le=MasterConstants.SORT_ORDER_MAX,
        description="Display ordering",
    )
    is_default: bool = Field(
        False,
        description="Preselected option for this type",
    )
    is_popular: bool = Field(
        False,
        description="Shown in popular views",
    )
    parent_id: Optional[str] = Field(
        None,
        description="Id of the parent record",
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form attributes",
    )

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v: Any) -> Any:
        if isinstance(v, str):
            return collapse_whitespace(v).title()
        return v

    @field_validator("code", mode="before")
    @classmethod
    def normalize_code(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v


class ParentAliasMixin(BaseSchema):
    """Accepts ``city_id`` as an alias for ``parent_id`` on input."""

    @model_validator(mode="before")
    @classmethod
    def map_city_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "city_id" in data:
            data = dict(data)
            city_id = data.pop("city_id")
            data.setdefault("parent_id", city_id)
        return data


def partial_model(model: Type[ModelT], name: str,
                  base: Type[BaseModel] = BaseSchema) -> Type[BaseModel]:
    """
    Build a PATCH schema where every field of ``model`` is optional.

    Field constraints are not copied; the merged document is
    re-validated against ``model`` by the engine before it is stored.

    Args:
        model: Create schema to derive from
        name: Class name of the generated schema
        base: Base class of the generated schema

    Returns:
        New pydantic model class whose fields all default to None
    """
    fields: Dict[str, Any] = {
        field_name: (
            Optional[info.annotation],
            Field(None, description=info.description),
        )
        for field_name, info in model.model_fields.items()
    }
    return create_model(name, __base__=base, **fields)


# ==============================================================================
# RESPONSE SCHEMAS
# ==============================================================================

class MasterRecord(TimestampSchema):
    """Stored master record as returned by the engine."""

    id: str = Field(..., description="Record identifier")
    master_type: MasterType = Field(..., description="Master data kind")
    name: str = Field(..., description="Display name")
    description: Optional[str] = None
    code: Optional[str] = None
    status: MasterStatus = MasterStatus.ACTIVE
    sort_order: int = 0
    is_default: bool = False
    is_popular: bool = False
    parent_id: Optional[str] = None
    parent_type: Optional[MasterType] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_by: Optional[str] = None
    updated_by: Optional[str] = None


class MasterStatistics(BaseSchema):
    """
    Counts shared by every master type.

    ``total`` and ``by_category`` cover non-archived records only;
    ``archived`` reports the soft-deleted ones separately.
    """

    total: int = 0
    active: int = 0
    inactive: int = 0
    archived: int = 0
    popular: int = 0
    default: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict)
    by_category: Dict[str, int] = Field(default_factory=dict)
