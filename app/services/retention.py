"""Data retention: purge token ledger rows whose signed token can no longer verify."""

import logging
from datetime import datetime, timezone, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.models import Token

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def purge_expired_tokens(session: Session, settings: "Settings") -> int:
    """
    Delete ledger rows issued more than JWT_EXPIRE_MINUTES ago.

    Such tokens already fail the exp check, so removing them changes no
    authentication outcome. Returns the number of rows deleted. Idempotent.
    """
    if not settings.RETENTION_ENABLED:
        logger.info("Retention is disabled (RETENTION_ENABLED=false); skipping.")
        return 0

    cutoff = datetime.now(timezone.utc) - timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    deleted_count = (
        session.query(Token)
        .filter(Token.created_at < cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Retention run: cutoff=%s, tokens_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
