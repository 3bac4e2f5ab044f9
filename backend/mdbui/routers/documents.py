"""
Documents router, scoped to a database and collection.

Documents are schemaless; request bodies are arbitrary JSON objects and may
use MongoDB extended JSON such as `{"$oid": "..."}`.
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from mdbui.config import Settings
from mdbui.core.pagination import clamp_limit, clamp_page
from mdbui.database.documents import encode_document, from_extended_json
from mdbui.dependencies import get_app_settings, get_database_service
from mdbui.models.database import DocumentPage
from mdbui.schemas import DocumentCreatedResponse, MessageResponse, QueryRequest
from mdbui.services.database_service import DatabaseService

router = APIRouter(prefix="/db/{db}/collections/{collection}", tags=["Documents"])


@router.get(
    "/documents",
    response_model=DocumentPage,
    summary="List documents",
)
async def list_documents(
    db: str,
    collection: str,
    page: Optional[str] = Query(None, description="Page number (defaults to 1)"),
    limit: Optional[str] = Query(None, description="Page size (invalid values use the default)"),
    service: DatabaseService = Depends(get_database_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    List documents, newest identifiers first.

    Invalid `page` / `limit` values fall back to 1 / the default page size
    instead of failing.
    """
    page_size = clamp_limit(limit, settings.default_page_size, settings.max_page_size)
    return await service.list_documents(db, collection, clamp_page(page), page_size)


@router.get(
    "/documents/{document_id}",
    summary="Get document",
)
async def get_document(
    db: str,
    collection: str,
    document_id: str,
    service: DatabaseService = Depends(get_database_service),
):
    """Get a document by its 24-character hex ObjectId."""
    document = await service.get_document(db, collection, document_id)
    return JSONResponse(content=encode_document(document))


@router.post(
    "/documents",
    response_model=DocumentCreatedResponse,
    summary="Create document",
)
async def create_document(
    db: str,
    collection: str,
    document: dict[str, Any] = Body(..., description="Document to insert"),
    service: DatabaseService = Depends(get_database_service),
):
    inserted_id = await service.create_document(db, collection, from_extended_json(document))
    return DocumentCreatedResponse(id=inserted_id)


@router.put(
    "/documents/{document_id}",
    response_model=MessageResponse,
    summary="Update document",
)
async def update_document(
    db: str,
    collection: str,
    document_id: str,
    document: dict[str, Any] = Body(..., description="Fields to set"),
    service: DatabaseService = Depends(get_database_service),
):
    """Set the given fields on a document. `_id` in the body is ignored."""
    await service.update_document(db, collection, document_id, from_extended_json(document))
    return MessageResponse(message="Document updated successfully")


@router.delete(
    "/documents/{document_id}",
    response_model=MessageResponse,
    summary="Delete document",
)
async def delete_document(
    db: str,
    collection: str,
    document_id: str,
    service: DatabaseService = Depends(get_database_service),
):
    await service.delete_document(db, collection, document_id)
    return MessageResponse(message="Document deleted successfully")


@router.post(
    "/query",
    response_model=DocumentPage,
    summary="Query documents",
)
async def query_documents(
    db: str,
    collection: str,
    body: QueryRequest,
    service: DatabaseService = Depends(get_database_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Find documents matching a raw MongoDB filter, with pagination.

    - **query**: Filter object passed to the server as-is
    - **page** / **limit**: Clamped to 1 / the default page size when invalid
    """
    return await service.query_documents(
        db,
        collection,
        from_extended_json(body.query),
        clamp_page(body.page),
        clamp_limit(body.limit, settings.default_page_size, settings.max_page_size),
    )
