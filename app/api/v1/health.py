"""Liveness for load balancers: database reachability and the attachment directory."""

import os
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse
from app.services.attachments import AttachmentStore, get_attachment_store

router = APIRouter()


def upload_directory_state(store: AttachmentStore) -> str:
    if not store.directory.is_dir():
        # Created on the first accepted upload.
        return "not_created"
    if not os.access(store.directory, os.W_OK | os.X_OK):
        return "unwritable"
    return "ready"


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[AttachmentStore, Depends(get_attachment_store)],
) -> HealthResponse:
    """Always 200; status is degraded when the database is down or uploads cannot be written."""
    database = "connected" if check_db_connected(db) else "disconnected"
    uploads = upload_directory_state(store)
    healthy = database == "connected" and uploads != "unwritable"
    return HealthResponse(
        status="ok" if healthy else "degraded",
        environment=settings.APP_ENV,
        database=database,
        uploads=uploads,
    )
