"""
Collections router, scoped to a database.
"""
from fastapi import APIRouter, Depends

from mdbui.dependencies import get_database_service
from mdbui.schemas import MessageResponse, NameRequest
from mdbui.services.database_service import DatabaseService

router = APIRouter(prefix="/db/{db}/collections", tags=["Collections"])


@router.get(
    "",
    response_model=list[str],
    summary="List collections",
)
async def list_collections(
    db: str,
    service: DatabaseService = Depends(get_database_service),
):
    return await service.list_collections(db)


@router.post(
    "",
    response_model=MessageResponse,
    summary="Create collection",
)
async def create_collection(
    db: str,
    body: NameRequest,
    service: DatabaseService = Depends(get_database_service),
):
    await service.create_collection(db, body.name)
    return MessageResponse(message="Collection created successfully")


@router.delete(
    "/{collection}",
    response_model=MessageResponse,
    summary="Drop collection",
)
async def delete_collection(
    db: str,
    collection: str,
    service: DatabaseService = Depends(get_database_service),
):
    await service.drop_collection(db, collection)
    return MessageResponse(message="Collection deleted successfully")
