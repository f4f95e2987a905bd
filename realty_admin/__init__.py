# ==============================================================================
# APP PACKAGE INITIALIZATION
# ==============================================================================
# Real-estate admin backend: master data catalogue on FastAPI + MongoDB
# ==============================================================================

"""
Realty Admin Master Data Service
================================

Back-office API for the reference catalogues a property listing draws on:
amenities, property types, washroom/bedroom/bathroom configurations,
cities and the locations inside them.

Features:
---------
- One generic master data engine driven by per-kind profiles
- Unique names per kind, parent/child checks, project usage checks
- Paged, searchable, sortable listings and per-kind statistics
- JWT-based authentication for administrators

Usage:
------
    from realty_admin.main import app

    # Run with uvicorn
    uvicorn realty_admin.main:app --reload

Version: 1.0.0
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
