"""
Database, collection and document request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class NameRequest(BaseModel):
    """Create database / create collection request."""
    name: str = Field(..., min_length=1, description="Name of the database or collection")


class QueryRequest(BaseModel):
    """
    Filtered document query.

    ``page`` and ``limit`` are loosely typed and clamped rather than rejected.
    """
    query: Optional[dict[str, Any]] = Field(None, description="Raw MongoDB filter (extended JSON allowed)")
    page: Any = Field(None, description="Page number (defaults to 1)")
    limit: Any = Field(None, description="Page size, 1-100 (defaults to 20)")


class DocumentCreatedResponse(BaseModel):
    """Create document response."""
    id: str = Field(..., description="Inserted document ID")
