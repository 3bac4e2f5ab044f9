"""
Core module - errors, locking, pagination and logging utilities.
"""
from mdbui.core.errors import (
    MdbUIError,
    NotFoundError,
    InvalidInputError,
    UpstreamError,
    PersistenceError,
)
from mdbui.core.locks import ReadWriteLock
from mdbui.core.pagination import clamp_page, clamp_limit, build_page_window

__all__ = [
    "MdbUIError",
    "NotFoundError",
    "InvalidInputError",
    "UpstreamError",
    "PersistenceError",
    "ReadWriteLock",
    "clamp_page",
    "clamp_limit",
    "build_page_window",
]
