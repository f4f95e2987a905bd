# ==============================================================================
# HELPER UTILITIES
# ==============================================================================
# Common utility functions used across the application
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timezone
import math
import re


_WHITESPACE = re.compile(r"\s+")


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def calculate_offset(page: int, page_size: int) -> int:
    """Calculate database offset from page number."""
    return (page - 1) * page_size


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed to hold ``total`` items (0 when empty)."""
    return math.ceil(total / page_size) if total > 0 else 0


def collapse_whitespace(value: str) -> str:
    """
    Trim a string and collapse internal whitespace runs to one space.

    Args:
        value: Input string

    Returns:
        Normalized string, e.g. ``"  swimming   pool "`` -> ``"swimming pool"``
    """
    return _WHITESPACE.sub(" ", value).strip()
