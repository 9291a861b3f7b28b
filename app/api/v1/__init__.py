"""API v1 routes."""

from fastapi import APIRouter, Depends

from app.api.v1 import auth, colors, fabric_rolls, fabrics, health, products, users
from app.api.v1.auth import require_admin

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Back-office resources: admin only.
_admin = [Depends(require_admin)]
router.include_router(products.router, prefix="/products", tags=["products"], dependencies=_admin)
router.include_router(fabrics.router, prefix="/fabric", tags=["fabrics"], dependencies=_admin)
router.include_router(
    fabric_rolls.router, prefix="/fabricrolls", tags=["fabric rolls"], dependencies=_admin
)
router.include_router(colors.router, prefix="/colors", tags=["colors"], dependencies=_admin)
router.include_router(users.router, prefix="/users", tags=["users"], dependencies=_admin)
