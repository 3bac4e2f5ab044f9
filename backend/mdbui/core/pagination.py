"""
Pagination helpers for document listings.

Query parameters arrive as raw strings (or loosely typed JSON values) and
are clamped silently: a page below 1 becomes 1, a limit outside [1, max]
becomes the default. Both bounds default to 20 / 100 and are configurable
through ``Settings.default_page_size`` and ``Settings.max_page_size``.
"""
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# Pages shown on either side of the current page in the page selector
PAGE_WINDOW = 2


def _to_int(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def clamp_page(raw: Any) -> int:
    """Parse a page number, falling back to 1 when missing, malformed or < 1."""
    page = _to_int(raw)
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def clamp_limit(raw: Any, default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> int:
    """Parse a page size, falling back to ``default`` when missing, malformed or outside [1, maximum]."""
    limit = _to_int(raw)
    if limit is None or limit < 1 or limit > maximum:
        return default
    return limit


class PageWindow(BaseModel):
    """Page selector state for the collection page."""
    total_pages: int = Field(..., ge=1, description="Number of pages (at least 1)")
    page_numbers: list[int] = Field(..., description="Page links around the current page")
    start: int = Field(..., description="1-based number of the first record shown, 0 when none")
    end: int = Field(..., description="1-based number of the last record shown, 0 when none")


def build_page_window(total: int, page: int, limit: int) -> PageWindow:
    """Compute page links and the record range for a listing of ``total`` rows."""
    total_pages = max((total + limit - 1) // limit, 1)

    first = max(page - PAGE_WINDOW, 1)
    last = min(page + PAGE_WINDOW, total_pages)

    start = (page - 1) * limit + 1
    end = min(page * limit, total)
    if start > end:
        # empty collection, or a page past the last record
        start = end = 0

    return PageWindow(
        total_pages=total_pages,
        page_numbers=list(range(first, last + 1)),
        start=start,
        end=end,
    )
