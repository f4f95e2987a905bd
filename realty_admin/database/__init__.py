# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Database Abstraction Layer over MongoDB
# ==============================================================================

"""
Database Module
===============

Key Components:
- Adapters: BaseDatabaseAdapter contract and the Motor implementation
- Factory: Adapter lifecycle and singleton access
"""

from realty_admin.database.factory import DatabaseFactory
from realty_admin.database.adapters.base_adapter import BaseDatabaseAdapter

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
]
