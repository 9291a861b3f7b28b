"""Form and response schemas for colors."""

from datetime import datetime

from pydantic import BaseModel, Field


class ColorCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    detail: str | None = None


class ColorUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    detail: str | None = None


class ColorRead(BaseModel):
    id: int
    name: str
    detail: str | None = None
    image: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
