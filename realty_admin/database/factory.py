# ==============================================================================
# DATABASE FACTORY - Process-wide Adapter
# ==============================================================================
# Owns the one adapter the API resolves per request. The lifespan opens it
# at startup and closes it at shutdown; tests install their own.
# ==============================================================================

from __future__ import annotations

import logging
from typing import Optional

from realty_admin.core.exceptions import DatabaseError
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.database.adapters.mongodb_adapter import MongoDBAdapter

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Holder of the active database adapter.

    Example:
        >>> await DatabaseFactory.initialize()
        >>> adapter = DatabaseFactory.get_adapter()
        >>> await DatabaseFactory.shutdown()
    """

    _instance: Optional[BaseDatabaseAdapter] = None

    @classmethod
    async def initialize(
        cls,
        adapter: Optional[BaseDatabaseAdapter] = None,
        **kwargs,
    ) -> BaseDatabaseAdapter:
        """
        Connect and cache an adapter.

        Args:
            adapter: Adapter to install as is; when omitted a MongoDBAdapter
                is built from ``kwargs`` (connection_url, database_name, client)
                unless one is already cached

        Raises:
            DatabaseError: connect() failed
        """
        if adapter is not None:
            cls._instance = adapter
        elif cls._instance is None:
            cls._instance = MongoDBAdapter(**kwargs)

        try:
            await cls._instance.connect()
        except DatabaseError:
            raise
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise DatabaseError(f"Failed to initialize database: {e}")

        logger.info(f"Database adapter ready: {type(cls._instance).__name__}")
        return cls._instance

    @classmethod
    async def shutdown(cls) -> None:
        """Disconnect and forget the adapter; disconnect errors are only logged."""
        adapter, cls._instance = cls._instance, None
        if adapter is None:
            return
        try:
            await adapter.disconnect()
        except Exception as e:
            logger.error(f"Error disconnecting database: {e}")

    @classmethod
    def get_adapter(cls) -> BaseDatabaseAdapter:
        if cls._instance is None:
            raise DatabaseError(
                "Database adapter not initialized; call DatabaseFactory.initialize() first"
            )
        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    async def health_check(cls) -> bool:
        return cls._instance is not None and await cls._instance.health_check()

    @classmethod
    def reset(cls) -> None:
        """Drop the cached adapter without disconnecting it."""
        cls._instance = None
