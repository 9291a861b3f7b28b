"""ORM model for fabric kinds kept in the catalogue."""

from sqlalchemy import Column, Integer, Numeric, String

from app.models.base import Base, SoftDeleteMixin

DEFAULT_FABRIC_STATUS = "available"


class Fabric(SoftDeleteMixin, Base):
    """Fabric with physical properties; status is free text (e.g. 'available')."""

    __tablename__ = "fabrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    width_cm = Column(Numeric(10, 2), nullable=False)
    weight_gm = Column(Numeric(10, 2), nullable=False)
    thickness_mm = Column(Numeric(10, 2), nullable=True)
    status = Column(
        String(64),
        nullable=False,
        default=DEFAULT_FABRIC_STATUS,
        server_default=DEFAULT_FABRIC_STATUS,
    )
    image = Column(String(1024), nullable=True)
