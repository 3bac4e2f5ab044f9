"""
Shared response schemas.
"""
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Acknowledgement for side-effecting operations."""
    message: str = Field(..., description="Human-readable result")
