"""
Connection profile request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mdbui.models.connection import ConnectionProfile


class ConnectionListResponse(BaseModel):
    """All profiles plus the current selection."""
    model_config = ConfigDict(populate_by_name=True)

    connections: list[ConnectionProfile] = Field(..., description="Stored profiles")
    current_id: Optional[str] = Field(None, alias="currentId", description="Current profile ID")


class ConnectionCreatedResponse(BaseModel):
    """Add connection response."""
    message: str = Field(..., description="Human-readable result")
    id: str = Field(..., description="Identifier of the stored profile")
