"""Form and response schemas for user management (admin)."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from app.schemas.auth import EMAIL_PATTERN


class UserCreate(BaseModel):
    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Literal["user", "admin"] = "user"


class UserUpdate(BaseModel):
    """Partial update; a new password is re-hashed before storage."""

    name: str | None = Field(default=None, min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    role: Literal["user", "admin"] | None = None


class UserRead(BaseModel):
    """User as returned by the API (never includes the password hash)."""

    id: int
    name: str
    email: str
    role: str
    image: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
