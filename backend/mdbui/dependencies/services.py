"""
Service dependencies resolved from the application state.

The store and the database service are built by ``create_app`` and its
lifespan; routes receive them through these dependencies.
"""
from fastapi import HTTPException, Request, status

from mdbui.config import Settings
from mdbui.services.connection_store import ConnectionStore
from mdbui.services.database_service import DatabaseService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_connection_store(request: Request) -> ConnectionStore:
    return request.app.state.store


def get_database_service(request: Request) -> DatabaseService:
    """
    Get the database service opened at startup.

    Raises:
        HTTPException 503: If the application started without a database connection
    """
    service = getattr(request.app.state, "db_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection is not initialized",
        )
    return service
