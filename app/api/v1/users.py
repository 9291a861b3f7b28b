"""
User management routes (admin). Same multipart shape as the catalogue
resources, with the profile image as attachment. Deleting a user, soft or
hard, also revokes every token the user holds.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import hash_password
from app.models import User
from app.schemas.common import MessageResponse
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.attachments import AttachmentStore, get_attachment_store
from app.services.auth import revoke_user_tokens
from app.services.mutation import AttachmentCoordinator

router = APIRouter()


def _password_to_hash(values: dict[str, Any]) -> dict[str, Any]:
    password = values.pop("password", None)
    if password is not None:
        values["password_hash"] = hash_password(password)
    return values


def get_coordinator(
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
) -> AttachmentCoordinator[User]:
    return AttachmentCoordinator(
        User,
        store,
        UserCreate,
        UserUpdate,
        label="User",
        to_columns=_password_to_hash,
    )


Coordinator = Annotated[AttachmentCoordinator[User], Depends(get_coordinator)]


@router.get("", response_model=list[UserRead])
def list_users(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> list[User]:
    return coordinator.list_live(db)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> User:
    return coordinator.get(db, user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
    role: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> User:
    """Create a user; name, email and password are required, role defaults to 'user'."""
    fields = {"name": name, "email": email, "password": password, "role": role}
    return coordinator.create(db, fields, image)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
    name: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
    role: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> User:
    """Partially update a user. Tokens already issued keep the role they were signed with."""
    fields = {"name": name, "email": email, "password": password, "role": role}
    return coordinator.update(db, user_id, fields, image)


@router.put("/delete/{user_id}", response_model=MessageResponse)
def soft_delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> MessageResponse:
    """Soft delete; the user can no longer log in and current sessions end."""
    revoke_user_tokens(db, user_id)
    coordinator.soft_delete(db, user_id)
    return MessageResponse(message="Deleted")


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    coordinator: Coordinator,
) -> MessageResponse:
    """Hard delete: removes the row, its tokens and, after the commit, its image file."""
    revoke_user_tokens(db, user_id)
    coordinator.hard_delete(db, user_id)
    return MessageResponse(message="Deleted")
