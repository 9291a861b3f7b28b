"""Form and response schemas for products."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    # Numeric(10, 2): at most 8 integer digits, finite only.
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class ProductUpdate(BaseModel):
    """Partial update: omitted fields keep their stored value."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class ProductRead(BaseModel):
    id: int
    name: str
    price: float
    image: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
