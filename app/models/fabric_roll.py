"""ORM model for physical fabric rolls in stock."""

from sqlalchemy import Column, Integer, Numeric, String

from app.models.base import Base, SoftDeleteMixin


class FabricRoll(SoftDeleteMixin, Base):
    """
    A roll of fabric identified by roll_code.

    type_id references the fabric type catalogue, which is managed outside
    this service, so no foreign key is declared.
    """

    __tablename__ = "fabric_rolls"

    id = Column(Integer, primary_key=True, autoincrement=True)
    roll_code = Column(String(64), nullable=False, unique=True, index=True)
    type_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    price_per_m = Column(Numeric(10, 2), nullable=False)
    stock_m = Column(Numeric(10, 2), nullable=False)
    image = Column(String(1024), nullable=True)
