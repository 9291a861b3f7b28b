"""ORM model for the token ledger: bearer tokens that are currently live."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.models.base import Base


class Token(Base):
    """
    One row per active session. A signed token that has no row here is
    rejected; logout deletes the row.
    """

    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token = Column(String(1024), nullable=False, unique=True, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
