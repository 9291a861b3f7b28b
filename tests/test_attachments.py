"""Unit tests for app.services.attachments: upload policy, generated names, best-effort deletes."""

import re
import shutil
import tempfile
import unittest
from pathlib import Path

from helpers import PNG_BYTES, image_upload, make_store

from app.core.errors import RejectedUpload
from app.services.attachments import UploadPolicy, generate_filename


class TestUploadPolicy(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = UploadPolicy(allowed_mime_pattern=r"image/(png|jpeg|jpg|webp|gif)", max_bytes=10)

    def test_whitelisted_types(self) -> None:
        for media_type in ("image/png", "image/jpeg", "image/webp", "image/gif", "IMAGE/PNG"):
            self.assertTrue(self.policy.allows_media_type(media_type), media_type)

    def test_parameters_are_ignored(self) -> None:
        self.assertTrue(self.policy.allows_media_type("image/png; charset=binary"))

    def test_rejected_types(self) -> None:
        for media_type in ("image/svg+xml", "application/pdf", "text/plain", "", None):
            self.assertFalse(self.policy.allows_media_type(media_type), media_type)


class TestGenerateFilename(unittest.TestCase):
    def test_shape_and_extension(self) -> None:
        name = generate_filename("Holiday Photo.PNG")
        self.assertRegex(name, r"^\d{13}-\d{1,9}\.png$")

    def test_no_extension(self) -> None:
        self.assertRegex(generate_filename("blob"), r"^\d{13}-\d{1,9}$")
        self.assertRegex(generate_filename(None), r"^\d{13}-\d{1,9}$")

    def test_suspicious_extension_dropped(self) -> None:
        self.assertTrue(re.fullmatch(r"\d{13}-\d{1,9}", generate_filename("x.p$p")))

    def test_names_are_unique(self) -> None:
        names = {generate_filename("a.png") for _ in range(200)}
        self.assertEqual(len(names), 200)


class TestAttachmentStore(unittest.TestCase):
    def setUp(self) -> None:
        self.root = Path(tempfile.mkdtemp())
        # Not created yet: the store creates it on first accepted upload.
        self.directory = self.root / "uploads"
        self.store = make_store(self.directory)

    def tearDown(self) -> None:
        shutil.rmtree(self.root, ignore_errors=True)

    def test_accept_writes_file_under_generated_name(self) -> None:
        stored = self.store.accept(image_upload("shirt.png"))
        self.assertTrue(stored.path.is_file())
        self.assertEqual(stored.path.read_bytes(), PNG_BYTES)
        self.assertEqual(stored.path.parent, self.directory)
        self.assertEqual(stored.url, f"/uploads/{stored.filename}")
        self.assertTrue(stored.filename.endswith(".png"))

    def test_disallowed_type_rejected_before_writing(self) -> None:
        with self.assertRaises(RejectedUpload) as ctx:
            self.store.accept(image_upload("doc.pdf", content_type="application/pdf"))
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertFalse(self.directory.exists())

    def test_oversized_rejected_before_writing(self) -> None:
        big = b"\x00" * (5 * 1024 * 1024 + 1)
        with self.assertRaises(RejectedUpload):
            self.store.accept(image_upload("big.png", data=big))
        self.assertFalse(self.directory.exists())

    def test_exactly_at_ceiling_is_accepted(self) -> None:
        stored = self.store.accept(image_upload("edge.png", data=b"\x00" * (5 * 1024 * 1024)))
        self.assertEqual(stored.path.stat().st_size, 5 * 1024 * 1024)

    def test_public_url(self) -> None:
        self.assertEqual(self.store.public_url("a.png"), "/uploads/a.png")
        self.assertIsNone(self.store.public_url(None))
        self.assertIsNone(self.store.public_url(""))

    def test_path_for_url_uses_basename_only(self) -> None:
        self.assertEqual(self.store.path_for_url("/uploads/a.png"), self.directory / "a.png")
        self.assertEqual(self.store.path_for_url("/uploads/../../etc/passwd"), self.directory / "passwd")
        self.assertIsNone(self.store.path_for_url(None))

    def test_delete_missing_file_is_not_an_error(self) -> None:
        self.store.delete(self.directory / "never-existed.png")
        self.store.delete(None)
        self.store.delete_url("/uploads/never-existed.png")

    def test_delete_url_removes_file(self) -> None:
        stored = self.store.accept(image_upload())
        self.store.delete_url(stored.url)
        self.assertFalse(stored.path.exists())

    def test_stored_files_lists_regular_files(self) -> None:
        self.assertEqual(list(self.store.stored_files()), [])
        first = self.store.accept(image_upload("a.png"))
        second = self.store.accept(image_upload("b.gif", content_type="image/gif"))
        (self.directory / "subdir").mkdir()
        self.assertEqual(set(self.store.stored_files()), {first.path, second.path})


if __name__ == "__main__":
    unittest.main()
