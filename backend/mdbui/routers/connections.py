"""
Connections router for managing named MongoDB connection profiles.

Store operations block on a lock and a file rewrite, so these routes are
plain functions that FastAPI runs in its threadpool.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from mdbui.config import Settings
from mdbui.core.errors import UpstreamError
from mdbui.database.connections import connect
from mdbui.dependencies import get_app_settings, get_connection_store
from mdbui.models.connection import ConnectionProfile
from mdbui.schemas import (
    ConnectionCreatedResponse,
    ConnectionListResponse,
    MessageResponse,
)
from mdbui.services.connection_store import ConnectionStore

router = APIRouter(prefix="/connections", tags=["Connections"])


@router.get(
    "",
    response_model=ConnectionListResponse,
    summary="List connection profiles",
)
def list_connections(store: ConnectionStore = Depends(get_connection_store)):
    """List all stored profiles and the identifier of the current one."""
    return ConnectionListResponse(
        connections=store.list_profiles(),
        current_id=store.get_current_id(),
    )


@router.get(
    "/current",
    response_model=ConnectionProfile,
    summary="Get current connection profile",
)
def get_current_connection(store: ConnectionStore = Depends(get_connection_store)):
    profile = store.get_current()
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No current connection",
        )
    return profile


@router.post(
    "/test",
    response_model=MessageResponse,
    summary="Test a connection profile",
)
async def test_connection(
    body: ConnectionProfile,
    settings: Settings = Depends(get_app_settings),
):
    """
    Connect to and ping the server described by the body.

    The profile is not stored.
    """
    try:
        client = await connect(body.get_uri(), timeout=settings.connect_timeout_seconds)
    except UpstreamError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to connect: {exc}",
        )
    client.close()
    return MessageResponse(message="Connection successful")


@router.get(
    "/{connection_id}",
    response_model=ConnectionProfile,
    summary="Get connection profile",
)
def get_connection(
    connection_id: str,
    store: ConnectionStore = Depends(get_connection_store),
):
    return store.get(connection_id)


@router.post(
    "",
    response_model=ConnectionCreatedResponse,
    summary="Add connection profile",
)
def add_connection(
    body: ConnectionProfile,
    store: ConnectionStore = Depends(get_connection_store),
):
    """
    Store a new profile.

    - **id**: Optional; generated from the current time when empty
    - **host** / **port** / **database**: Server address and default database
    - **username** / **password** / **authDB**: Optional credentials
    """
    profile = store.add(body)
    return ConnectionCreatedResponse(message="Connection added successfully", id=profile.id)


@router.put(
    "/{connection_id}",
    response_model=MessageResponse,
    summary="Update connection profile",
)
def update_connection(
    connection_id: str,
    body: ConnectionProfile,
    store: ConnectionStore = Depends(get_connection_store),
):
    store.update(connection_id, body)
    return MessageResponse(message="Connection updated successfully")


@router.delete(
    "/{connection_id}",
    response_model=MessageResponse,
    summary="Delete connection profile",
)
def delete_connection(
    connection_id: str,
    store: ConnectionStore = Depends(get_connection_store),
):
    store.delete(connection_id)
    return MessageResponse(message="Connection deleted successfully")


@router.post(
    "/{connection_id}/current",
    response_model=MessageResponse,
    summary="Set current connection profile",
)
def set_current_connection(
    connection_id: str,
    store: ConnectionStore = Depends(get_connection_store),
):
    """
    Select the profile used to open the database connection.

    The running server keeps its existing connection; the selection applies
    on next start.
    """
    store.set_current(connection_id)
    return MessageResponse(message="Current connection set successfully")
