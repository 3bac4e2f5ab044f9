"""
Request and response schemas for API endpoints.
"""
from mdbui.schemas.common import MessageResponse
from mdbui.schemas.connection import ConnectionListResponse, ConnectionCreatedResponse
from mdbui.schemas.database import NameRequest, QueryRequest, DocumentCreatedResponse

__all__ = [
    "MessageResponse",
    # Connections
    "ConnectionListResponse",
    "ConnectionCreatedResponse",
    # Databases / documents
    "NameRequest",
    "QueryRequest",
    "DocumentCreatedResponse",
]
