"""Fabric routes (mounted at /fabric)."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Fabric
from app.schemas.common import MessageResponse
from app.schemas.fabric import FabricCreate, FabricRead, FabricUpdate
from app.services.attachments import AttachmentStore, get_attachment_store
from app.services.mutation import AttachmentCoordinator

router = APIRouter()


def get_coordinator(
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
) -> AttachmentCoordinator[Fabric]:
    return AttachmentCoordinator(Fabric, store, FabricCreate, FabricUpdate, label="Fabric")


Coordinator = Annotated[AttachmentCoordinator[Fabric], Depends(get_coordinator)]


@router.get("", response_model=list[FabricRead])
def list_fabrics(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> list[Fabric]:
    return coordinator.list_live(db)


@router.get("/{fabric_id}", response_model=FabricRead)
def get_fabric(
    fabric_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> Fabric:
    return coordinator.get(db, fabric_id)


@router.post("", response_model=FabricRead, status_code=status.HTTP_201_CREATED)
def create_fabric(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    width_cm: Annotated[str | None, Form()] = None,
    weight_gm: Annotated[str | None, Form()] = None,
    thickness_mm: Annotated[str | None, Form()] = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> Fabric:
    """Create a fabric; name, width_cm and weight_gm are required, status defaults to 'available'."""
    fields = {
        "name": name,
        "width_cm": width_cm,
        "weight_gm": weight_gm,
        "thickness_mm": thickness_mm,
        "status": status_,
    }
    return coordinator.create(db, fields, image)


@router.put("/{fabric_id}", response_model=FabricRead)
def update_fabric(
    fabric_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    width_cm: Annotated[str | None, Form()] = None,
    weight_gm: Annotated[str | None, Form()] = None,
    thickness_mm: Annotated[str | None, Form()] = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> Fabric:
    fields = {
        "name": name,
        "width_cm": width_cm,
        "weight_gm": weight_gm,
        "thickness_mm": thickness_mm,
        "status": status_,
    }
    return coordinator.update(db, fabric_id, fields, image)


@router.put("/delete/{fabric_id}", response_model=MessageResponse)
def delete_fabric(
    fabric_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> MessageResponse:
    coordinator.soft_delete(db, fabric_id)
    return MessageResponse(message="Deleted")
