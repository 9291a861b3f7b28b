"""SQLAlchemy declarative Base and shared model configuration."""

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class SoftDeleteMixin:
    """
    created_at / deleted_at columns shared by soft-deletable tables.

    Rows with deleted_at set are logically gone: excluded from list, get and
    update, but physically retained together with their attachment.
    """

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
