# ==============================================================================
# BASE SCHEMAS - Shared Models
# ==============================================================================
# Model config, timestamps, pagination block and the success envelope
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    Parent of every request and response model.

    Enum members are kept as their values, defaults included, so a
    validated payload can be written to MongoDB without another
    conversion step.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class TimestampSchema(BaseSchema):
    created_at: Optional[datetime] = Field(None, description="Set once on create")
    updated_at: Optional[datetime] = Field(None, description="Refreshed on every write")


class PaginationMeta(BaseModel):
    """``page``/``limit`` echo the request; ``total_pages`` is ceil(total / limit)."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1, le=100)
    total: int = Field(..., ge=0, description="Records matching the filters")
    total_pages: int = Field(..., ge=0)


class APIResponse(BaseModel, Generic[T]):
    """
    Success envelope: ``{"success": true, "message": ..., "data": ...}``.
    ``errors`` is kept in the schema for clients and stays None here.

    Failures never go through this model; AppException.to_dict renders them.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def ok(cls, data: T, message: Optional[str] = None) -> "APIResponse[T]":
        return cls(data=data, message=message)


class HealthResponse(BaseSchema):
    status: str = Field(..., description="healthy or degraded")
    version: str
    database: str = Field(..., description="connected or disconnected")
