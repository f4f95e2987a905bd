# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Service Layer
=============

- MasterDataEngine: Generic master data CRUD, query and statistics
- masters: Per-kind profiles and accessors built on the engine
- UserService: Authentication and admin accounts
"""

from realty_admin.services.master_engine import (
    MasterDataEngine,
    MasterProfile,
    ensure_master_indexes,
    referenced_by,
)
from realty_admin.services.user_service import UserService

__all__ = [
    "MasterDataEngine",
    "MasterProfile",
    "ensure_master_indexes",
    "referenced_by",
    "UserService",
]
