"""Product routes: list/get, multipart create/update with an optional image, soft delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Product
from app.schemas.common import MessageResponse
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.services.attachments import AttachmentStore, get_attachment_store
from app.services.mutation import AttachmentCoordinator

router = APIRouter()


def get_coordinator(
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
) -> AttachmentCoordinator[Product]:
    return AttachmentCoordinator(Product, store, ProductCreate, ProductUpdate, label="Product")


Coordinator = Annotated[AttachmentCoordinator[Product], Depends(get_coordinator)]


@router.get("", response_model=list[ProductRead])
def list_products(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> list[Product]:
    """All products that are not soft-deleted."""
    return coordinator.list_live(db)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> Product:
    return coordinator.get(db, product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    price: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> Product:
    """
    Create a product from a multipart form.

    - **name**, **price**: required.
    - **image**: optional png/jpeg/webp/gif up to 5 MB; returned as `/uploads/<file>`.
    """
    return coordinator.create(db, {"name": name, "price": price}, image)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    price: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> Product:
    """
    Partially update a product. Omitted fields are unchanged; a new image
    replaces the old one, which is deleted once the update is committed.
    """
    return coordinator.update(db, product_id, {"name": name, "price": price}, image)


@router.put("/delete/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> MessageResponse:
    """Soft delete: the row and its image are kept but hidden from every read."""
    coordinator.soft_delete(db, product_id)
    return MessageResponse(message="Deleted")
