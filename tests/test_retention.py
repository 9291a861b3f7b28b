"""Unit and integration tests for maintenance jobs: token ledger purge and orphaned upload sweep."""

import os
import time
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

from helpers import DatabaseTestCase, image_upload

from app.models import Color, Product, Token
from app.services.orphans import find_orphaned_files, sweep_orphaned_files
from app.services.retention import purge_expired_tokens


class TestPurgeDisabled(unittest.TestCase):
    """When RETENTION_ENABLED is False, purge_expired_tokens does nothing."""

    def test_returns_zero_and_does_not_query(self) -> None:
        settings = MagicMock()
        settings.RETENTION_ENABLED = False
        settings.JWT_EXPIRE_MINUTES = 1440
        session = MagicMock()
        self.assertEqual(purge_expired_tokens(session, settings), 0)
        session.query.assert_not_called()


class TestPurgeCounts(unittest.TestCase):
    def test_returns_deleted_count_and_commits(self) -> None:
        settings = MagicMock()
        settings.RETENTION_ENABLED = True
        settings.JWT_EXPIRE_MINUTES = 1440
        session = MagicMock()
        session.query.return_value.filter.return_value.delete.return_value = 3
        self.assertEqual(purge_expired_tokens(session, settings), 3)
        session.commit.assert_called_once()


class TestPurgeAgainstDatabase(DatabaseTestCase):
    """Only ledger rows older than the token lifetime are removed."""

    def test_old_rows_removed_recent_rows_kept(self) -> None:
        user_id = self.create_user("t@x.com")
        settings = MagicMock()
        settings.RETENTION_ENABLED = True
        settings.JWT_EXPIRE_MINUTES = 60
        now = datetime.now(timezone.utc)
        db = self.SessionLocal()
        try:
            db.add(Token(user_id=user_id, token="stale", created_at=now - timedelta(hours=2)))
            db.add(Token(user_id=user_id, token="fresh", created_at=now - timedelta(minutes=5)))
            db.commit()

            self.assertEqual(purge_expired_tokens(db, settings), 1)
            self.assertEqual([t.token for t in db.query(Token).all()], ["fresh"])
        finally:
            db.close()


class TestOrphanSweep(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.db = self.SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        super().tearDown()

    def age(self, path, minutes: int) -> None:
        past = time.time() - minutes * 60
        os.utime(path, (past, past))

    def test_only_old_unreferenced_files_are_orphans(self) -> None:
        referenced = self.store.accept(image_upload("a.png"))
        owned_by_deleted = self.store.accept(image_upload("b.png"))
        orphan = self.store.accept(image_upload("c.png"))
        fresh_orphan = self.store.accept(image_upload("d.png"))
        for stored in (referenced, owned_by_deleted, orphan):
            self.age(stored.path, 120)

        self.db.add(Product(name="Shirt", price=1, image=referenced.url))
        self.db.add(
            Color(name="Red", image=owned_by_deleted.url, deleted_at=datetime.now(timezone.utc))
        )
        self.db.commit()

        orphans = find_orphaned_files(self.db, self.store, grace_minutes=60)
        self.assertEqual(orphans, [orphan.path])
        self.assertTrue(fresh_orphan.path.exists())

    def test_sweep_reports_without_deleting_by_default(self) -> None:
        orphan = self.store.accept(image_upload())
        self.age(orphan.path, 120)
        self.assertEqual(sweep_orphaned_files(self.db, self.store, grace_minutes=60), [orphan.path])
        self.assertTrue(orphan.path.exists())

    def test_sweep_deletes_when_asked(self) -> None:
        orphan = self.store.accept(image_upload())
        self.age(orphan.path, 120)
        sweep_orphaned_files(self.db, self.store, grace_minutes=60, delete=True)
        self.assertFalse(orphan.path.exists())

    def test_empty_directory_has_no_orphans(self) -> None:
        self.assertEqual(find_orphaned_files(self.db, self.store, grace_minutes=0), [])

    def test_file_removed_during_sweep_is_skipped(self) -> None:
        orphan = self.store.accept(image_upload())
        self.age(orphan.path, 120)
        vanished = self.upload_dir / "1700000000000-1.png"
        listing = [vanished, orphan.path]
        with patch.object(self.store, "stored_files", return_value=iter(listing)):
            orphans = sweep_orphaned_files(self.db, self.store, grace_minutes=60, delete=True)
        self.assertEqual(orphans, [orphan.path])
        self.assertFalse(orphan.path.exists())


if __name__ == "__main__":
    unittest.main()
