"""ORM model for sellable products."""

from sqlalchemy import Column, Integer, Numeric, String

from app.models.base import Base, SoftDeleteMixin


class Product(SoftDeleteMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    image = Column(String(1024), nullable=True)
