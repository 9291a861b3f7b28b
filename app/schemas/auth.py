"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from app.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class RegisterRequest(BaseModel):
    """New account; password is stored as a salted bcrypt hash."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Literal["user", "admin"] = Field(default="user", description="Account role")


class RegisterResponse(BaseModel):
    message: str = "Registered"
    id: int


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN, description="Email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class LoginResponse(BaseModel):
    """Bearer token returned after successful login."""

    message: str = "Logged in"
    token: str = Field(..., description="JWT bearer token")
    token_type: str = Field(default="bearer", description="Token type")


class Principal(BaseModel):
    """Authenticated identity (id, role, email) attached to a request."""

    id: int
    role: str
    email: str

    class Config:
        from_attributes = True
