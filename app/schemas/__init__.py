"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    Principal,
    RegisterRequest,
    RegisterResponse,
)
from app.schemas.color import ColorCreate, ColorRead, ColorUpdate
from app.schemas.common import MessageResponse
from app.schemas.fabric import FabricCreate, FabricRead, FabricUpdate
from app.schemas.fabric_roll import FabricRollCreate, FabricRollRead, FabricRollUpdate
from app.schemas.health import HealthResponse
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "ColorCreate",
    "ColorRead",
    "ColorUpdate",
    "FabricCreate",
    "FabricRead",
    "FabricRollCreate",
    "FabricRollRead",
    "FabricRollUpdate",
    "FabricUpdate",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "Principal",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "RegisterRequest",
    "RegisterResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
