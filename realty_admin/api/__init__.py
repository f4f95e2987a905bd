# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI routers and endpoint definitions:
- Dependencies: Authentication, database access, master data services
- Routers: Auth, Amenities, Property Types, Washrooms, Bedrooms,
  Bathrooms, Cities, Locations
"""

from realty_admin.api.router import api_router

__all__ = ["api_router"]
