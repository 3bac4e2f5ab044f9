"""
Databases router for listing, inspecting, creating and dropping databases.
"""
from fastapi import APIRouter, Depends

from mdbui.dependencies import get_database_service
from mdbui.models.database import DatabaseInfo, ServerStats
from mdbui.schemas import MessageResponse, NameRequest
from mdbui.services.database_service import DatabaseService

router = APIRouter(tags=["Databases"])


@router.get(
    "/databases",
    response_model=list[str],
    summary="List databases",
)
async def list_databases(service: DatabaseService = Depends(get_database_service)):
    return await service.list_databases()


@router.post(
    "/databases",
    response_model=MessageResponse,
    summary="Create database",
)
async def create_database(
    body: NameRequest,
    service: DatabaseService = Depends(get_database_service),
):
    """
    Create a database.

    MongoDB has no explicit create; a placeholder collection named
    `init_collection` is created inside the new database.
    """
    await service.create_database(body.name)
    return MessageResponse(message="Database created successfully")


@router.get(
    "/databases/{name}",
    response_model=DatabaseInfo,
    summary="Get database info and stats",
)
async def get_database(
    name: str,
    service: DatabaseService = Depends(get_database_service),
):
    """
    Get the collections of a database and a dbStats snapshot.

    If dbStats fails only the collection count is reported.
    """
    return await service.get_database(name)


@router.delete(
    "/databases/{name}",
    response_model=MessageResponse,
    summary="Drop database",
)
async def delete_database(
    name: str,
    service: DatabaseService = Depends(get_database_service),
):
    """
    Drop a database and all of its collections.

    **Warning**: This action cannot be undone.
    """
    await service.drop_database(name)
    return MessageResponse(message="Database deleted successfully")


@router.get(
    "/stats",
    response_model=ServerStats,
    summary="Server statistics",
)
async def get_stats(service: DatabaseService = Depends(get_database_service)):
    """Version, uptime, connection and memory counters plus the database count."""
    return await service.get_server_stats()
