"""
MongoDB Admin Console - FastAPI Application

Browse and edit MongoDB databases, collections and documents, and manage
named connection profiles stored in a local JSON file.
"""
import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mdbui import __version__
from mdbui.config import Settings, get_settings
from mdbui.core.errors import (
    InvalidInputError,
    MdbUIError,
    NotFoundError,
    PersistenceError,
    UpstreamError,
)
from mdbui.core.logging_setup import configure_logging
from mdbui.database.connections import connect
from mdbui.routers import collections, connections, databases, documents, pages
from mdbui.services.connection_store import ConnectionStore
from mdbui.services.database_service import DatabaseService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    UpstreamError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB client for the current connection profile
    - Build the database service

    Shutdown:
    - Close the MongoDB client

    A startup failure aborts the server.
    """
    settings: Settings = app.state.settings
    store: ConnectionStore = app.state.store

    profile = store.get_current()
    if profile is None:
        logger.critical("No database connection configured")
        raise RuntimeError("No database connection configured")

    logger.info("Connecting to profile %s (%s:%s)", profile.id, profile.host, profile.port)
    try:
        client = await connect(profile.get_uri(), timeout=settings.connect_timeout_seconds)
    except UpstreamError as exc:
        logger.critical("Failed to connect to MongoDB: %s", exc)
        raise

    app.state.db_service = DatabaseService(
        client,
        profile,
        timeout=settings.operation_timeout_seconds,
        drop_timeout=settings.drop_timeout_seconds,
        max_limit=settings.max_page_size,
    )

    yield

    logger.info("Shutting down, closing MongoDB client")
    app.state.db_service = None
    client.close()


async def handle_app_error(request: Request, exc: MdbUIError) -> JSONResponse:
    """Map service errors to an HTTP status carrying the error message."""
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ConnectionStore] = None,
) -> FastAPI:
    """
    Build the application around an explicitly constructed connection store.

    When no store is given one is created for ``settings.connections_file``
    and loaded from disk.
    """
    settings = settings or get_settings()
    if store is None:
        store = ConnectionStore(settings.connections_file)
        store.load()

    app = FastAPI(
        title="MongoDB Admin API",
        description="""
## MongoDB administration console

### Features
- **Connections**: Named connection profiles persisted to a local JSON file
- **Databases / Collections**: List, inspect, create and drop
- **Documents**: Paginated listing, raw filter queries and CRUD by ObjectId
- **Stats**: Server status counters

Page-rendering routes (`/`, `/connections`, `/database/...`) mirror the
read-only API for the browser.
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.db_service = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    )
    app.add_exception_handler(MdbUIError, handle_app_error)

    # Include routers
    app.include_router(connections.router, prefix=API_PREFIX)
    app.include_router(databases.router, prefix=API_PREFIX)
    app.include_router(collections.router, prefix=API_PREFIX)
    app.include_router(documents.router, prefix=API_PREFIX)
    app.include_router(pages.router)

    return app


def parse_args(argv: Optional[Sequence[str]], settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mdbui",
        description="MongoDB administration console",
        epilog=(
            "examples:\n"
            "  mdbui                           start with default settings\n"
            "  mdbui --host 0.0.0.0 --port 8080\n"
            "  mdbui --port 9000"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Bind host (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Bind port (default: {settings.port})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Command-line entry point; ``-h``/``--help`` prints usage and exits 0."""
    settings = get_settings()
    args = parse_args(argv, settings)
    settings = settings.model_copy(update={"host": args.host, "port": args.port})

    configure_logging(settings.log_level)

    store = ConnectionStore(settings.connections_file)
    try:
        store.load()
    except PersistenceError as exc:
        logger.critical("Failed to load connections: %s", exc)
        sys.exit(1)

    if store.get_current() is None:
        logger.critical("No database connection configured")
        sys.exit(1)

    app = create_app(settings, store)

    logger.info("Server starting on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
