"""Fabric roll routes (mounted at /fabricrolls)."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import FabricRoll
from app.schemas.common import MessageResponse
from app.schemas.fabric_roll import FabricRollCreate, FabricRollRead, FabricRollUpdate
from app.services.attachments import AttachmentStore, get_attachment_store
from app.services.mutation import AttachmentCoordinator

router = APIRouter()


def get_coordinator(
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
) -> AttachmentCoordinator[FabricRoll]:
    return AttachmentCoordinator(
        FabricRoll, store, FabricRollCreate, FabricRollUpdate, label="Fabric roll"
    )


Coordinator = Annotated[AttachmentCoordinator[FabricRoll], Depends(get_coordinator)]


@router.get("", response_model=list[FabricRollRead])
def list_fabric_rolls(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> list[FabricRoll]:
    return coordinator.list_live(db)


@router.get("/{roll_id}", response_model=FabricRollRead)
def get_fabric_roll(
    roll_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> FabricRoll:
    return coordinator.get(db, roll_id)


@router.post("", response_model=FabricRollRead, status_code=status.HTTP_201_CREATED)
def create_fabric_roll(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    roll_code: Annotated[str | None, Form()] = None,
    type_id: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
    price_per_m: Annotated[str | None, Form()] = None,
    stock_m: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> FabricRoll:
    """Create a roll; every field except image is required. roll_code must be unique."""
    fields = {
        "roll_code": roll_code,
        "type_id": type_id,
        "name": name,
        "price_per_m": price_per_m,
        "stock_m": stock_m,
    }
    return coordinator.create(db, fields, image)


@router.put("/{roll_id}", response_model=FabricRollRead)
def update_fabric_roll(
    roll_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    roll_code: Annotated[str | None, Form()] = None,
    type_id: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
    price_per_m: Annotated[str | None, Form()] = None,
    stock_m: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> FabricRoll:
    fields = {
        "roll_code": roll_code,
        "type_id": type_id,
        "name": name,
        "price_per_m": price_per_m,
        "stock_m": stock_m,
    }
    return coordinator.update(db, roll_id, fields, image)


@router.put("/delete/{roll_id}", response_model=MessageResponse)
def delete_fabric_roll(
    roll_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> MessageResponse:
    coordinator.soft_delete(db, roll_id)
    return MessageResponse(message="Deleted")
