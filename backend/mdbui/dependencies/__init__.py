"""
Dependencies for dependency injection in routes.
"""
from mdbui.dependencies.services import (
    get_app_settings,
    get_connection_store,
    get_database_service,
)

__all__ = [
    "get_app_settings",
    "get_connection_store",
    "get_database_service",
]
