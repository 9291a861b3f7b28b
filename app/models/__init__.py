"""SQLAlchemy ORM models."""

from app.models.base import Base, SoftDeleteMixin
from app.models.color import Color
from app.models.fabric import Fabric
from app.models.fabric_roll import FabricRoll
from app.models.product import Product
from app.models.token import Token
from app.models.user import User

# Models whose rows own a file in the upload store (column "image").
ATTACHMENT_MODELS = (Product, Fabric, FabricRoll, Color, User)

__all__ = [
    "ATTACHMENT_MODELS",
    "Base",
    "Color",
    "Fabric",
    "FabricRoll",
    "Product",
    "SoftDeleteMixin",
    "Token",
    "User",
]
