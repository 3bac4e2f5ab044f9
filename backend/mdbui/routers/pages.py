"""
Browser pages mirroring the read-only API.

Failures render the error page with status 500 instead of a JSON body.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mdbui.config import Settings
from mdbui.core.errors import MdbUIError
from mdbui.core.pagination import build_page_window, clamp_limit, clamp_page
from mdbui.database.documents import encode_document
from mdbui.dependencies import get_app_settings, get_connection_store, get_database_service
from mdbui.services.connection_store import ConnectionStore
from mdbui.services.database_service import DatabaseService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Pages"], include_in_schema=False)


def _error_page(request: Request, exc: MdbUIError) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "error": str(exc)},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    service: DatabaseService = Depends(get_database_service),
    store: ConnectionStore = Depends(get_connection_store),
):
    try:
        databases = await service.list_databases()
    except MdbUIError as exc:
        return _error_page(request, exc)

    # the store lock may be held across a file rewrite
    current_connection = await run_in_threadpool(store.get_current)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": "MongoDB Admin",
            "databases": databases,
            "current_connection": current_connection,
        },
    )


@router.get("/connections", response_class=HTMLResponse)
def connections_page(
    request: Request,
    store: ConnectionStore = Depends(get_connection_store),
):
    return templates.TemplateResponse(
        request,
        "connections.html",
        {
            "title": "Connections",
            "connections": store.list_profiles(),
            "current_id": store.get_current_id(),
        },
    )


@router.get("/database/{db}", response_class=HTMLResponse)
async def database_page(
    request: Request,
    db: str,
    service: DatabaseService = Depends(get_database_service),
):
    try:
        info = await service.get_database(db)
    except MdbUIError as exc:
        return _error_page(request, exc)

    return templates.TemplateResponse(
        request,
        "database.html",
        {"title": f"{db} - Database", "db_info": info},
    )


@router.get("/database/{db}/collection/{collection}", response_class=HTMLResponse)
async def collection_page(
    request: Request,
    db: str,
    collection: str,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: DatabaseService = Depends(get_database_service),
    settings: Settings = Depends(get_app_settings),
):
    page_number = clamp_page(page)
    page_size = clamp_limit(limit, settings.default_page_size, settings.max_page_size)
    try:
        result = await service.list_documents(db, collection, page_number, page_size)
    except MdbUIError as exc:
        return _error_page(request, exc)

    window = build_page_window(result.total, result.page, result.limit)
    return templates.TemplateResponse(
        request,
        "collection.html",
        {
            "title": f"{collection} - Collection",
            "db_name": db,
            "collection": collection,
            "documents": [encode_document(doc) for doc in result.documents],
            "total": result.total,
            "page": result.page,
            "limit": result.limit,
            "window": window,
        },
    )
