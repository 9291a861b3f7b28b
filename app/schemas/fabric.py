"""Form and response schemas for fabrics."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from app.models.fabric import DEFAULT_FABRIC_STATUS


class FabricCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    width_cm: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    weight_gm: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    thickness_mm: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    status: str = Field(default=DEFAULT_FABRIC_STATUS, min_length=1, max_length=64)


class FabricUpdate(BaseModel):
    """Partial update: omitted fields keep their stored value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    width_cm: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    weight_gm: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    thickness_mm: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    status: str | None = Field(default=None, min_length=1, max_length=64)


class FabricRead(BaseModel):
    id: int
    name: str
    width_cm: float
    weight_gm: float
    thickness_mm: float | None = None
    status: str
    image: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
