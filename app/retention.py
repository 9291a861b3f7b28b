"""
CLI entrypoint for maintenance jobs. Run from cron, e.g.:

  python -m app.retention
  python -m app.retention --delete-orphans

Purges expired token ledger rows, then reports stored uploads that no row
references (and removes them with --delete-orphans).
"""

import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.attachments import get_attachment_store
from app.services.orphans import sweep_orphaned_files
from app.services.retention import purge_expired_tokens

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run retention: purge expired tokens and sweep orphaned uploads."""
    parser = argparse.ArgumentParser(description="Token ledger retention and upload sweep.")
    parser.add_argument(
        "--delete-orphans",
        action="store_true",
        help="Delete unreferenced uploads instead of only reporting them",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    db = SessionLocal()
    try:
        tokens_deleted = purge_expired_tokens(db, settings)
        orphans = sweep_orphaned_files(
            db,
            get_attachment_store(),
            grace_minutes=settings.ORPHAN_GRACE_MINUTES,
            delete=args.delete_orphans,
        )
        logger.info(
            "Retention completed: tokens_deleted=%s orphaned_uploads=%s deleted=%s",
            tokens_deleted,
            len(orphans),
            args.delete_orphans,
        )
        return 0
    except Exception as e:
        logger.exception("Retention job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
