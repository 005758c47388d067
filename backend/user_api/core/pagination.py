"""Pagination — normalize page/page_size query values into a LIMIT/OFFSET window.

Invariants:
    - Raw query values that are missing or not integers fall back to their defaults
    - page < 1 is treated as page 1; page > MAX_PAGE is treated as MAX_PAGE
    - page_size outside 1..MAX_PAGE_SIZE falls back to DEFAULT_PAGE_SIZE (not clamped)
    - offset is always (page - 1) * limit, never negative, never above a signed 64-bit int
"""

from typing import NamedTuple

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_PAGE_SIZE + 1


class PageWindow(NamedTuple):
    limit: int
    offset: int


def parse_page_param(raw: str | None, default: int) -> int:
    """Parse a query value as an int, returning default when it does not parse."""
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def normalize_page(page: int, page_size: int) -> PageWindow:
    """Convert 1-based page numbers into a LIMIT/OFFSET pair."""
    if page < 1:
        page = 1
    elif page > MAX_PAGE:
        page = MAX_PAGE
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        page_size = DEFAULT_PAGE_SIZE
    return PageWindow(limit=page_size, offset=(page - 1) * page_size)
