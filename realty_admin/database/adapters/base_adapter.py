# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# The document operations the master engine and the user service need.
# Records are plain dicts keyed by a string ``id``.
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

# Ordered (field, direction) pairs; direction is 1 or -1
SortKeys = Sequence[Tuple[str, int]]


class BaseDatabaseAdapter(ABC, Generic[T]):
    """
    Storage contract behind DatabaseFactory.

    Unknown or malformed ids are not errors at this level: lookups return
    None and deletes return False, leaving the 404 decision to the caller.
    """

    # --- lifecycle ------------------------------------------------------------

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection; raises DatabaseError when the store is unreachable."""

    @abstractmethod
    async def disconnect(self) -> None:
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        ...

    # --- records --------------------------------------------------------------

    @abstractmethod
    async def create(self, collection: str, data: Dict[str, Any]) -> T:
        """
        Insert ``data`` and return it with its generated ``id``.

        Raises:
            AlreadyExistsError: A unique index rejected the document
        """

    @abstractmethod
    async def get_by_id(self, collection: str, id: Any) -> Optional[T]:
        ...

    @abstractmethod
    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 0,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortKeys] = None,
    ) -> List[T]:
        """Matching records in ``sort`` order; ``limit=0`` returns all of them."""

    @abstractmethod
    async def update(self, collection: str, id: Any, data: Dict[str, Any]) -> Optional[T]:
        """Set the given fields; None when the record does not exist."""

    @abstractmethod
    async def delete(self, collection: str, id: Any) -> bool:
        ...

    # --- queries --------------------------------------------------------------

    @abstractmethod
    async def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        ...

    @abstractmethod
    async def exists(self, collection: str, filters: Dict[str, Any]) -> bool:
        ...

    @abstractmethod
    async def find_one(self, collection: str, filters: Dict[str, Any]) -> Optional[T]:
        ...

    @abstractmethod
    async def aggregate(
        self,
        collection: str,
        pipeline: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """Pipeline output as is; group keys stay under ``_id``."""

    @abstractmethod
    async def create_index(
        self,
        collection: str,
        keys: SortKeys,
        name: str,
        unique: bool = False,
    ) -> str:
        """Create the index unless it exists; returns its name."""
