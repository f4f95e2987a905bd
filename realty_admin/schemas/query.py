# ==============================================================================
# QUERY SCHEMAS - List Criteria & Paged Results
# ==============================================================================
# Filter/sort/paginate request understood by the master data engine
# ==============================================================================

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from realty_admin.core.constants import APIConstants
from realty_admin.schemas.base import BaseSchema, PaginationMeta
from realty_admin.schemas.master import MasterStatus

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def split_csv(v: Any) -> Any:
    """Accept ``a,b`` as well as repeated query params for list filters."""
    if v is None:
        return v
    values = v if isinstance(v, list) else [v]
    parts = []
    for value in values:
        if isinstance(value, str):
            parts.extend(p.strip() for p in value.split(",") if p.strip())
        else:
            parts.append(value)
    return parts or None


class MasterQuery(BaseSchema):
    """
    List criteria common to every master type.

    Archived records are left out unless ``status`` names ``archived``.
    Per-kind subclasses add their own filters; the matching profile turns
    them into query clauses.
    """

    page: int = Field(
        1,
        ge=1,
        description="Page number (1-indexed)",
    )
    limit: int = Field(
        APIConstants.DEFAULT_PAGE_SIZE,
        ge=APIConstants.MIN_PAGE_SIZE,
        le=APIConstants.MAX_PAGE_SIZE,
        description="Items per page",
    )
    search: Optional[str] = Field(
        None,
        max_length=100,
        description="Case-insensitive text matched against searchable fields",
    )
    status: Optional[List[MasterStatus]] = Field(
        None,
        description="One or more statuses to include",
    )
    is_default: Optional[bool] = None
    is_popular: Optional[bool] = None
    parent_id: Optional[str] = None
    sort_by: Optional[str] = Field(
        None,
        description="Sort field (must be allowed for the master type)",
    )
    sort_order: SortDirection = Field(
        SortDirection.ASC,
        description="Sort direction",
    )

    @field_validator("status", mode="before")
    @classmethod
    def split_status(cls, v: Any) -> Any:
        return split_csv(v)

    @field_validator("search", mode="before")
    @classmethod
    def blank_search(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v


class MasterPage(BaseModel, Generic[T]):
    """One page of records plus pagination metadata."""

    items: List[T] = Field(default_factory=list)
    pagination: PaginationMeta
