"""Color routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Color
from app.schemas.color import ColorCreate, ColorRead, ColorUpdate
from app.schemas.common import MessageResponse
from app.services.attachments import AttachmentStore, get_attachment_store
from app.services.mutation import AttachmentCoordinator

router = APIRouter()


def get_coordinator(
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
) -> AttachmentCoordinator[Color]:
    return AttachmentCoordinator(Color, store, ColorCreate, ColorUpdate, label="Color")


Coordinator = Annotated[AttachmentCoordinator[Color], Depends(get_coordinator)]


@router.get("", response_model=list[ColorRead])
def list_colors(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> list[Color]:
    return coordinator.list_live(db)


@router.get("/{color_id}", response_model=ColorRead)
def get_color(
    color_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> Color:
    return coordinator.get(db, color_id)


@router.post("", response_model=ColorRead, status_code=status.HTTP_201_CREATED)
def create_color(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    detail: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> Color:
    return coordinator.create(db, {"name": name, "detail": detail}, image)


@router.put("/{color_id}", response_model=ColorRead)
def update_color(
    color_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    detail: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> Color:
    return coordinator.update(db, color_id, {"name": name, "detail": detail}, image)


@router.put("/delete/{color_id}", response_model=MessageResponse)
def delete_color(
    color_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> MessageResponse:
    coordinator.soft_delete(db, color_id)
    return MessageResponse(message="Deleted")
