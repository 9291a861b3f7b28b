"""ORM model for colors offered for fabrics and products."""

from sqlalchemy import Column, Integer, String, Text

from app.models.base import Base, SoftDeleteMixin


class Color(SoftDeleteMixin, Base):
    __tablename__ = "colors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    detail = Column(Text, nullable=True)
    image = Column(String(1024), nullable=True)
