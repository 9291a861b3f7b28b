"""Form and response schemas for fabric rolls."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class FabricRollCreate(BaseModel):
    roll_code: str = Field(..., min_length=1, max_length=64)
    type_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=255)
    price_per_m: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock_m: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class FabricRollUpdate(BaseModel):
    """Partial update: omitted fields keep their stored value."""

    roll_code: str | None = Field(default=None, min_length=1, max_length=64)
    type_id: int | None = Field(default=None, ge=1)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price_per_m: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    stock_m: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class FabricRollRead(BaseModel):
    id: int
    roll_code: str
    type_id: int
    name: str
    price_per_m: float
    stock_m: float
    image: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
