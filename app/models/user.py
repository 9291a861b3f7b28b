"""ORM model for application users (credentials, RBAC, profile image)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base, SoftDeleteMixin


class User(SoftDeleteMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'
    image: public URL of the profile image in the upload store, or None
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")
    image = Column(String(1024), nullable=True)
