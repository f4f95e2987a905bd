# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

- BaseDatabaseAdapter: Abstract interface definition
- MongoDBAdapter: MongoDB using Motor async driver
"""

from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter
from realty_admin.database.adapters.mongodb_adapter import MongoDBAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "MongoDBAdapter",
]
