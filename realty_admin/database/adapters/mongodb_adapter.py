# ==============================================================================
# MONGODB ADAPTER - Motor Async Driver Implementation
# ==============================================================================
# Document store behind the master data engine. Ids travel through the
# rest of the code as strings; ObjectId never leaves this module.
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from realty_admin.core.settings import settings
from realty_admin.core.exceptions import AlreadyExistsError, DatabaseError
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter, SortKeys

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


def to_object_id(value: Any) -> Optional[ObjectId]:
    """ObjectId for ``value``, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def with_string_id(document: Optional[Document]) -> Optional[Document]:
    """Rename ``_id`` to ``id`` and stringify it (in place)."""
    if document is not None and "_id" in document:
        document["id"] = str(document.pop("_id"))
    return document


@contextmanager
def unique_violation(collection: str) -> Iterator[None]:
    """Surface a unique index violation as AlreadyExistsError."""
    try:
        yield
    except DuplicateKeyError as e:
        key = (e.details or {}).get("keyValue")
        logger.warning(f"Duplicate key in '{collection}': {key}")
        raise AlreadyExistsError(
            message="Duplicate key",
            resource_type=collection,
            details={"key": key},
        )


class MongoDBAdapter(BaseDatabaseAdapter[Document]):
    """
    MongoDB adapter using the Motor async driver.

    Documents are handed out with a string ``id`` instead of ``_id``.
    Filters may use ``id`` too, including operator forms such as
    ``{"id": {"$ne": some_id}}``. A malformed id matches nothing.

    Example:
        >>> adapter = MongoDBAdapter()
        >>> await adapter.connect()
        >>> doc = await adapter.create("masters", {"name": "Gym"})
        >>> doc["id"]
        '65a1f0c2...'
    """

    def __init__(
        self,
        connection_url: Optional[str] = None,
        database_name: Optional[str] = None,
        client: Optional[AsyncIOMotorClient] = None,
    ) -> None:
        """
        Args:
            connection_url: MongoDB URI (defaults to settings.MONGODB_URL)
            database_name: Database name (defaults to settings.MONGODB_DB)
            client: Ready Motor-compatible client; connect() attaches to it
                instead of opening a pool, and disconnect() leaves it open
        """
        self._connection_url = connection_url or settings.MONGODB_URL
        self._database_name = database_name or settings.MONGODB_DB
        self._client = client
        self._owns_client = client is None
        self._database: Optional[AsyncIOMotorDatabase] = None

    def _query(self, filters: Optional[Document]) -> Document:
        """Translate ``id`` keys of a filter document to ``_id``."""
        query: Document = {}
        for key, value in (filters or {}).items():
            if key != "id":
                query[key] = value
            elif isinstance(value, dict):
                query["_id"] = {op: to_object_id(v) for op, v in value.items()}
            else:
                query["_id"] = to_object_id(value)
        return query

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise DatabaseError("Database not connected. Call connect() first.")
        return self._database

    # ==========================================================================
    # LIFECYCLE
    # ==========================================================================

    async def connect(self) -> None:
        if not self._owns_client:
            self._database = self._client[self._database_name]
            logger.info(f"MongoDB adapter attached to {self._database_name}")
            return

        try:
            self._client = AsyncIOMotorClient(
                self._connection_url, **settings.mongo_client_options
            )
            self._database = self._client[self._database_name]
            await self._client.admin.command("ping")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseError(f"MongoDB connection failed: {e}")

        logger.info(f"MongoDB adapter connected to {self._database_name}")

    async def disconnect(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
        self._database = None
        logger.info("MongoDB adapter disconnected")

    async def health_check(self) -> bool:
        if self._database is None:
            return False
        try:
            await self._database.command("ping")
        except Exception as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False
        return True

    # ==========================================================================
    # CRUD
    # ==========================================================================

    async def create(self, collection: str, data: Document) -> Document:
        document = {k: v for k, v in data.items() if k != "id"}

        with unique_violation(collection):
            result = await self.database[collection].insert_one(document)

        document.pop("_id", None)
        document["id"] = str(result.inserted_id)
        return document

    async def get_by_id(self, collection: str, id: Any) -> Optional[Document]:
        object_id = to_object_id(id)
        if object_id is None:
            return None
        return with_string_id(
            await self.database[collection].find_one({"_id": object_id})
        )

    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 0,
        filters: Optional[Document] = None,
        sort: Optional[SortKeys] = None,
    ) -> List[Document]:
        cursor = self.database[collection].find(self._query(filters))
        if sort:
            cursor = cursor.sort(list(sort))
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        return [with_string_id(doc) for doc in await cursor.to_list(length=limit or None)]

    async def update(self, collection: str, id: Any, data: Document) -> Optional[Document]:
        """``$set`` the given fields and return the document after the update."""
        object_id = to_object_id(id)
        if object_id is None:
            return None

        changes = {k: v for k, v in data.items() if k != "id"}
        with unique_violation(collection):
            document = await self.database[collection].find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        return with_string_id(document)

    async def delete(self, collection: str, id: Any) -> bool:
        object_id = to_object_id(id)
        if object_id is None:
            return False
        result = await self.database[collection].delete_one({"_id": object_id})
        return result.deleted_count > 0

    # ==========================================================================
    # QUERIES
    # ==========================================================================

    async def count(self, collection: str, filters: Optional[Document] = None) -> int:
        return await self.database[collection].count_documents(self._query(filters))

    async def exists(self, collection: str, filters: Document) -> bool:
        found = await self.database[collection].find_one(self._query(filters), {"_id": 1})
        return found is not None

    async def find_one(self, collection: str, filters: Document) -> Optional[Document]:
        return with_string_id(
            await self.database[collection].find_one(self._query(filters))
        )

    async def aggregate(self, collection: str, pipeline: List[Document]) -> List[Document]:
        """Run ``pipeline``; result documents keep their raw ``_id``."""
        cursor = self.database[collection].aggregate(pipeline)
        return await cursor.to_list(length=None)

    async def create_index(
        self,
        collection: str,
        keys: SortKeys,
        name: str,
        unique: bool = False,
    ) -> str:
        return await self.database[collection].create_index(
            list(keys), name=name, unique=unique
        )
