"""
Service layer for connection profiles and database access.
"""
from mdbui.services.connection_store import ConnectionStore
from mdbui.services.database_service import DatabaseService

__all__ = [
    "ConnectionStore",
    "DatabaseService",
]
