"""
Pydantic models for connection profiles and database read results.
"""
from mdbui.models.connection import ConnectionProfile
from mdbui.models.database import (
    DatabaseStats,
    DatabaseInfo,
    DocumentPage,
    ServerStats,
)

__all__ = [
    "ConnectionProfile",
    "DatabaseStats",
    "DatabaseInfo",
    "DocumentPage",
    "ServerStats",
]
