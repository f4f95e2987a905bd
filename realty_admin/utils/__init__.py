# ==============================================================================
# UTILS PACKAGE INITIALIZATION
# ==============================================================================

"""
Utilities Module
================

Helper functions and utilities:
- Pagination helpers
- Date/time utilities
- String normalization
"""

from realty_admin.utils.helpers import (
    utc_now,
    calculate_offset,
    total_pages,
    collapse_whitespace,
)

__all__ = [
    "utc_now",
    "calculate_offset",
    "total_pages",
    "collapse_whitespace",
]
