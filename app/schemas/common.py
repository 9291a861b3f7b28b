"""Shared response schemas."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement; error responses use the same shape."""

    message: str = Field(..., description="Human-readable status message")
