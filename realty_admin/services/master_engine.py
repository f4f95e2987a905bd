# ==============================================================================
# MASTER DATA ENGINE - Generic CRUD, Query & Statistics
# ==============================================================================
# One engine implementation shared by every master data kind, configured
# by a MasterProfile rather than subclassed
# ==============================================================================

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    Union,
)

from pydantic import BaseModel, ValidationError as PydanticValidationError
from pymongo import ASCENDING, DESCENDING

from realty_admin.core.constants import DatabaseConstants, ErrorMessages, MasterConstants
from realty_admin.core.exceptions import (
    AlreadyExistsError,
    AppException,
    BadRequestError,
    NotFoundError,
    ResourceInUseError,
)
from realty_admin.core.settings import settings
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter, SortKeys
from realty_admin.schemas.base import PaginationMeta
from realty_admin.schemas.master import (
    MasterBase,
    MasterRecord,
    MasterStatistics,
    MasterStatus,
    MasterType,
)
from realty_admin.schemas.query import MasterPage, MasterQuery, SortDirection
from realty_admin.utils.helpers import calculate_offset, total_pages, utc_now

logger = logging.getLogger(__name__)

MASTERS_COLLECTION = DatabaseConstants.MASTERS_COLLECTION

ARCHIVED = MasterStatus.ARCHIVED.value

UsageCheck = Callable[[BaseDatabaseAdapter, str], Awaitable[None]]
FilterBuilder = Callable[[MasterQuery], Dict[str, Any]]


# ==============================================================================
# PROFILE
# ==============================================================================

@dataclass(frozen=True)
class MasterProfile:
    """
    Capability record describing one master data kind.

    Attributes:
        master_type: Value stored in ``master_type`` for this kind
        label: Human readable name used in messages ("Amenity")
        create_schema: Schema every stored payload must satisfy
        record_schema: Schema records are returned as
        searchable_fields: Fields matched by the ``search`` criterion
        sortable_fields: Allow-list for ``sort_by``
        default_sort: Sort field used when none is requested
        query_schema: Criteria model whose extra fields extra_filters reads
        extra_filters: Turns kind-specific query fields into a query document
        usage_checks: Guards run before a record is removed
        parent_type: Kind a ``parent_id`` must point to (None: no parent)
        parent_required: Whether a parent is mandatory
        category_field: Field grouped into ``by_category`` statistics
    """

    master_type: MasterType
    label: str
    create_schema: Type[MasterBase]
    record_schema: Type[MasterRecord]
    searchable_fields: Tuple[str, ...] = ("name", "description", "code")
    sortable_fields: Tuple[str, ...] = (
        "name", "code", "sort_order", "status", "created_at", "updated_at",
    )
    default_sort: str = "sort_order"
    query_schema: Type[MasterQuery] = MasterQuery
    extra_filters: Optional[FilterBuilder] = None
    usage_checks: Tuple[UsageCheck, ...] = ()
    parent_type: Optional[MasterType] = None
    parent_required: bool = False
    category_field: Optional[str] = None


def referenced_by(field: str, label: str,
                  collection: Optional[str] = None) -> UsageCheck:
    """
    Build a usage check that blocks removal while documents reference a record.

    The check counts documents of ``collection`` (``USAGE_CHECK_COLLECTION``
    by default) whose ``field`` equals the record id; for array fields
    MongoDB matches membership, so ``{"amenities": id}`` works for both.

    Args:
        field: Referencing field in the other collection
        label: Plural noun used in the error message ("projects")
        collection: Referencing collection

    Returns:
        Async callable ``(adapter, record_id) -> None``
    """

    async def check(adapter: BaseDatabaseAdapter, record_id: str) -> None:
        target = collection or settings.USAGE_CHECK_COLLECTION
        in_use = await adapter.count(target, {field: record_id})
        if in_use:
            raise ResourceInUseError(
                message=f"Record is in use by {in_use} {label}",
                details={"collection": target, "field": field, "count": in_use},
            )

    return check


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Wrap unexpected storage failures into BadRequestError."""
    try:
        yield
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Master data operation '{operation}' failed: {e}")
        raise BadRequestError(
            message=f"Failed to {operation}",
            details={"error": str(e)},
        )


async def ensure_master_indexes(adapter: BaseDatabaseAdapter) -> None:
    """
    Create the indexes the engine relies on.

    The unique ``(master_type, name)`` index is the source of truth for
    name uniqueness; the others back child checks and status filters.
    """
    await adapter.create_index(
        MASTERS_COLLECTION,
        [("master_type", ASCENDING), ("name", ASCENDING)],
        name=DatabaseConstants.MASTER_NAME_INDEX,
        unique=True,
    )
    await adapter.create_index(
        MASTERS_COLLECTION,
        [("master_type", ASCENDING), ("parent_id", ASCENDING)],
        name=DatabaseConstants.MASTER_PARENT_INDEX,
    )
    await adapter.create_index(
        MASTERS_COLLECTION,
        [("master_type", ASCENDING), ("status", ASCENDING)],
        name=DatabaseConstants.MASTER_STATUS_INDEX,
    )
    logger.info("Master data indexes ensured")


# ==============================================================================
# ENGINE
# ==============================================================================

class MasterDataEngine:
    """
    Generic master data service bound to one profile.

    All kinds live in the ``masters`` collection and are told apart by
    ``master_type``; every query the engine issues is scoped to its own
    type.

    Errors raised:
        AlreadyExistsError: duplicate name or code within the type
        NotFoundError: unknown, malformed or foreign-type id
        BadRequestError: invalid payload, invalid parent, blocked delete,
            unsupported sort field or any storage failure

    Example:
        >>> engine = MasterDataEngine(adapter, AMENITY_PROFILE)
        >>> pool = await engine.create({"name": "pool", "category": "recreational"})
        >>> pool.name
        'Pool'
    """

    collection = MASTERS_COLLECTION

    def __init__(self, adapter: BaseDatabaseAdapter, profile: MasterProfile) -> None:
        self.adapter = adapter
        self.profile = profile

    @property
    def master_type(self) -> str:
        return self.profile.master_type.value

    @property
    def label(self) -> str:
        return self.profile.label

    # ==========================================================================
    # SCOPES & CONVERSION
    # ==========================================================================

    def scope(self, include_archived: bool = False, **filters: Any) -> Dict[str, Any]:
        """Query document limited to this master type (and non-archived records)."""
        query: Dict[str, Any] = {"master_type": self.master_type}
        if not include_archived:
            query["status"] = {"$ne": ARCHIVED}
        query.update(filters)
        return query

    def to_record(self, document: Mapping[str, Any]) -> MasterRecord:
        return self.profile.record_schema.model_validate(dict(document))

    def _validate(self, data: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
        raw = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        try:
            model = self.profile.create_schema.model_validate(raw)
        except PydanticValidationError as e:
            raise BadRequestError(
                message=f"Invalid {self.label.lower()} data",
                details={
                    "errors": e.errors(
                        include_url=False,
                        include_context=False,
                        include_input=False,
                    )
                },
            )
        return model.model_dump()

    async def _get_document(self, record_id: str) -> Dict[str, Any]:
        with _storage_errors(f"load {self.label.lower()}"):
            document = await self.adapter.get_by_id(self.collection, record_id)

        if document is None or document.get("master_type") != self.master_type:
            raise NotFoundError(
                message=f"{self.label} not found",
                resource_type=self.master_type,
                resource_id=record_id,
            )
        return document

    # ==========================================================================
    # INVARIANT CHECKS
    # ==========================================================================

    async def _ensure_unique(self, payload: Mapping[str, Any],
                             exclude_id: Optional[str] = None) -> None:
        for field in ("name", "code"):
            value = payload.get(field)
            if value is None:
                continue

            filters: Dict[str, Any] = {"master_type": self.master_type, field: value}
            if exclude_id:
                filters["id"] = {"$ne": exclude_id}

            if await self.adapter.exists(self.collection, filters):
                raise AlreadyExistsError(
                    message=f"{self.label} with {field} '{value}' already exists",
                    resource_type=self.master_type,
                    details={"field": field, "value": value},
                )

    async def _validate_parent(self, parent_id: Optional[str],
                               record_id: Optional[str] = None) -> None:
        parent_type = self.profile.parent_type

        if parent_id is None:
            if self.profile.parent_required:
                raise BadRequestError(
                    message=f"{self.label} requires a parent {parent_type.value}",
                )
            return

        if parent_type is None:
            raise BadRequestError(
                message=f"{self.label} records cannot have a parent",
                details={"parent_id": parent_id},
            )

        if record_id is not None and parent_id == record_id:
            raise BadRequestError(
                message="A record cannot be its own parent",
                details={"parent_id": parent_id},
            )

        parent = await self.adapter.get_by_id(self.collection, parent_id)
        if (
            parent is None
            or parent.get("master_type") != parent_type.value
            or parent.get("status") == ARCHIVED
        ):
            raise BadRequestError(
                message=f"{ErrorMessages.INVALID_PARENT}: no active "
                        f"{parent_type.value} with id '{parent_id}'",
                details={"parent_id": parent_id, "parent_type": parent_type.value},
            )

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(self, data: Union[BaseModel, Mapping[str, Any]],
                     actor_id: Optional[str] = None) -> MasterRecord:
        """
        Validate and store a new record of this type.

        Args:
            data: Create schema instance or raw mapping
            actor_id: Id of the caller, stored in created_by/updated_by

        Returns:
            The stored record

        Raises:
            BadRequestError: Invalid payload or parent
            AlreadyExistsError: Name or code already used within the type
        """
        payload = self._validate(data)

        with _storage_errors(f"create {self.label.lower()}"):
            await self._ensure_unique(payload)
            await self._validate_parent(payload.get("parent_id"))

            now = utc_now()
            document = {
                **payload,
                "master_type": self.master_type,
                "parent_type": (
                    self.profile.parent_type.value if self.profile.parent_type else None
                ),
                "created_at": now,
                "updated_at": now,
                "created_by": actor_id,
                "updated_by": actor_id,
            }
            created = await self.adapter.create(self.collection, document)
            stored = await self.adapter.get_by_id(self.collection, created["id"])

        logger.info(f"{self.label} created: {stored['id']} ({stored['name']})")
        return self.to_record(stored)

    async def find_all(self, query: Optional[MasterQuery] = None) -> MasterPage:
        """
        List one page of records matching ``query``.

        Raises:
            BadRequestError: ``sort_by`` is not allowed for this type
        """
        query = self._coerce_query(query)
        filters = self._build_filters(query)
        sort = self._build_sort(query)

        with _storage_errors(f"list {self.label.lower()} records"):
            total = await self.adapter.count(self.collection, filters)
            documents = await self.adapter.get_all(
                self.collection,
                skip=calculate_offset(query.page, query.limit),
                limit=query.limit,
                filters=filters,
                sort=sort,
            )

        return MasterPage[self.profile.record_schema](
            items=[self.to_record(doc) for doc in documents],
            pagination=PaginationMeta(
                page=query.page,
                limit=query.limit,
                total=total,
                total_pages=total_pages(total, query.limit),
            ),
        )

    async def find_by_id(self, record_id: str) -> MasterRecord:
        """Return a record of this type, archived ones included."""
        return self.to_record(await self._get_document(record_id))

    async def update(self, record_id: str,
                     data: Union[BaseModel, Mapping[str, Any]],
                     actor_id: Optional[str] = None) -> MasterRecord:
        """
        Merge a partial payload into a record and re-validate it.

        Only top-level fields are merged; a nested object in ``data``
        replaces the stored one. Identity and audit-creation fields are
        never changed.

        Raises:
            NotFoundError: Unknown record
            BadRequestError: Merged payload invalid, or invalid parent
            AlreadyExistsError: New name or code already used
        """
        current = await self._get_document(record_id)

        if isinstance(data, BaseModel):
            changes = data.model_dump(exclude_unset=True)
        else:
            changes = dict(data)
        changes = {
            key: value for key, value in changes.items()
            if key not in MasterConstants.IMMUTABLE_FIELDS
        }

        fields = self.profile.create_schema.model_fields
        stored = {key: value for key, value in current.items() if key in fields}
        merged = self._validate({**stored, **changes})

        with _storage_errors(f"update {self.label.lower()}"):
            await self._ensure_unique(merged, exclude_id=record_id)
            if merged.get("parent_id") != current.get("parent_id") or (
                self.profile.parent_required and merged.get("parent_id") is None
            ):
                await self._validate_parent(merged.get("parent_id"), record_id=record_id)

            updated = await self.adapter.update(
                self.collection,
                record_id,
                {**merged, "updated_at": utc_now(), "updated_by": actor_id},
            )

        if updated is None:
            raise NotFoundError(
                message=f"{self.label} not found",
                resource_type=self.master_type,
                resource_id=record_id,
            )

        logger.info(f"{self.label} updated: {record_id} ({sorted(changes)})")
        return self.to_record(updated)

    async def remove(self, record_id: str) -> MasterRecord:
        """
        Physically delete a record.

        Refused while other records name it as their parent or while a
        usage check reports it in use.

        Returns:
            The record as it was before deletion
        """
        current = await self._get_document(record_id)

        with _storage_errors(f"delete {self.label.lower()}"):
            children = await self.adapter.count(
                self.collection, {"parent_id": record_id}
            )
            if children:
                raise BadRequestError(
                    message=ErrorMessages.HAS_CHILDREN,
                    details={"record_id": record_id, "children": children},
                )

            for check in self.profile.usage_checks:
                await check(self.adapter, record_id)

            await self.adapter.delete(self.collection, record_id)

        logger.info(f"{self.label} deleted: {record_id} ({current.get('name')})")
        return self.to_record(current)

    # ==========================================================================
    # ACCESSOR HELPERS
    # ==========================================================================

    async def find_many(self, filters: Optional[Dict[str, Any]] = None,
                        sort: Optional[SortKeys] = None,
                        limit: int = 0) -> List[MasterRecord]:
        """Unpaginated list of non-archived records matching ``filters``."""
        with _storage_errors(f"list {self.label.lower()} records"):
            documents = await self.adapter.get_all(
                self.collection,
                limit=limit,
                filters=self.scope(**(filters or {})),
                sort=sort or [("sort_order", ASCENDING), ("name", ASCENDING)],
            )
        return [self.to_record(doc) for doc in documents]

    async def find_by_field(self, field: str, value: Any,
                            sort: Optional[SortKeys] = None) -> List[MasterRecord]:
        return await self.find_many({field: value}, sort=sort)

    async def find_by_parent(self, parent_id: str) -> List[MasterRecord]:
        """Non-archived children of ``parent_id`` ordered by sort_order, name."""
        return await self.find_many({"parent_id": parent_id})

    async def count(self, include_archived: bool = False, **filters: Any) -> int:
        with _storage_errors(f"count {self.label.lower()} records"):
            return await self.adapter.count(
                self.collection, self.scope(include_archived, **filters)
            )

    async def aggregate(self, stages: List[Dict[str, Any]],
                        include_archived: bool = False) -> List[Dict[str, Any]]:
        """Run ``stages`` after a ``$match`` on this type's (non-archived) records."""
        pipeline = [{"$match": self.scope(include_archived)}, *stages]
        with _storage_errors(f"aggregate {self.label.lower()} statistics"):
            return await self.adapter.aggregate(self.collection, pipeline)

    async def count_by(self, field: str, prefix: str = "", unwind: bool = False,
                       include_archived: bool = False) -> Dict[str, int]:
        """
        Group-by count over ``field``, largest groups first.

        Args:
            field: Field (dotted paths allowed) to group on
            prefix: Prepended to every key, e.g. ``"level_"``
            unwind: Treat ``field`` as an array and count its elements
            include_archived: Count archived records as well
        """
        stages: List[Dict[str, Any]] = []
        if unwind:
            stages.append({"$unwind": f"${field}"})
        stages += [
            {"$match": {field: {"$ne": None}}},
            {"$group": {"_id": f"${field}", "count": {"$sum": 1}}},
            {"$sort": {"count": DESCENDING, "_id": ASCENDING}},
        ]
        rows = await self.aggregate(stages, include_archived=include_archived)
        return {f"{prefix}{row['_id']}": row["count"] for row in rows}

    async def average(self, field: str) -> Optional[float]:
        """Mean of ``field`` over non-archived records (None when empty)."""
        rows = await self.aggregate([
            {"$match": {field: {"$ne": None}}},
            {"$group": {"_id": None, "value": {"$avg": f"${field}"}}},
        ])
        if not rows or rows[0].get("value") is None:
            return None
        return round(rows[0]["value"], 2)

    # ==========================================================================
    # STATISTICS
    # ==========================================================================

    async def base_statistics(self) -> Dict[str, Any]:
        """Counts shared by every type, as a dict ready to feed a statistics schema."""
        by_status = await self.count_by("status", include_archived=True)
        archived = by_status.get(ARCHIVED, 0)
        category_field = self.profile.category_field

        return {
            "total": sum(by_status.values()) - archived,
            "active": by_status.get(MasterStatus.ACTIVE.value, 0),
            "inactive": by_status.get(MasterStatus.INACTIVE.value, 0),
            "archived": archived,
            "popular": await self.count(is_popular=True),
            "default": await self.count(is_default=True),
            "by_status": by_status,
            "by_category": await self.count_by(category_field) if category_field else {},
        }

    async def get_statistics(self) -> MasterStatistics:
        return MasterStatistics(**await self.base_statistics())

    async def ensure_indexes(self) -> None:
        await ensure_master_indexes(self.adapter)

    # ==========================================================================
    # QUERY BUILDING
    # ==========================================================================

    def _coerce_query(self, query: Optional[MasterQuery]) -> MasterQuery:
        """Re-read ``query`` as this kind's criteria model so its extra filters resolve."""
        schema = self.profile.query_schema
        if isinstance(query, schema):
            return query
        return schema.model_validate(query.model_dump(exclude_unset=True) if query else {})

    def _build_filters(self, query: MasterQuery) -> Dict[str, Any]:
        filters: Dict[str, Any] = {"master_type": self.master_type}

        if query.status:
            filters["status"] = {"$in": list(query.status)}
        else:
            filters["status"] = {"$ne": ARCHIVED}

        if query.is_default is not None:
            filters["is_default"] = query.is_default
        if query.is_popular is not None:
            filters["is_popular"] = query.is_popular
        if query.parent_id:
            filters["parent_id"] = query.parent_id

        if query.search:
            pattern = {"$regex": re.escape(query.search), "$options": "i"}
            filters["$or"] = [
                {field: pattern} for field in self.profile.searchable_fields
            ]

        extra = self.profile.extra_filters(query) if self.profile.extra_filters else {}
        if extra:
            return {"$and": [filters, extra]}
        return filters

    def _build_sort(self, query: MasterQuery) -> List[Tuple[str, int]]:
        sort_by = query.sort_by or self.profile.default_sort
        if sort_by not in self.profile.sortable_fields:
            raise BadRequestError(
                message=f"{ErrorMessages.INVALID_SORT_FIELD}: '{sort_by}'",
                details={"allowed": list(self.profile.sortable_fields)},
            )

        direction = DESCENDING if query.sort_order == SortDirection.DESC.value else ASCENDING
        sort = [(sort_by, direction)]
        if sort_by != "name":
            sort.append(("name", ASCENDING))
        return sort
