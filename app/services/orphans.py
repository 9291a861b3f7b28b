"""Find stored files that no row references (left behind by crashes or concurrent updates)."""

import logging
import time
from pathlib import Path

from sqlalchemy.orm import Session

from app.models import ATTACHMENT_MODELS
from app.services.attachments import AttachmentStore

logger = logging.getLogger(__name__)


def referenced_filenames(session: Session, store: AttachmentStore) -> set[str]:
    """Basenames referenced by any row, soft-deleted rows included."""
    names: set[str] = set()
    for model in ATTACHMENT_MODELS:
        for (url,) in session.query(model.image).filter(model.image.isnot(None)):
            path = store.path_for_url(url)
            if path is not None:
                names.add(path.name)
    return names


def find_orphaned_files(
    session: Session,
    store: AttachmentStore,
    grace_minutes: int,
) -> list[Path]:
    """
    Files in the store that are unreferenced and older than grace_minutes.

    The grace period protects uploads that are staged but whose row is not
    committed yet. Files owned by soft-deleted rows are still referenced and
    are never reported.
    """
    referenced = referenced_filenames(session, store)
    cutoff = time.time() - grace_minutes * 60
    orphans = []
    for path in store.stored_files():
        if path.name in referenced:
            continue
        try:
            modified = path.stat().st_mtime
        except FileNotFoundError:
            # Removed since the listing, e.g. by an update replacing its image.
            continue
        if modified > cutoff:
            continue
        orphans.append(path)
    return orphans


def sweep_orphaned_files(
    session: Session,
    store: AttachmentStore,
    grace_minutes: int,
    delete: bool = False,
) -> list[Path]:
    """Report orphaned files, deleting them when delete=True. Returns the orphans found."""
    orphans = find_orphaned_files(session, store, grace_minutes)
    for path in orphans:
        if delete:
            store.delete(path)
            logger.info("Removed orphaned upload %s", path.name)
        else:
            logger.info("Orphaned upload %s", path.name)
    return orphans
