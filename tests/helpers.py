"""Shared fixtures: in-memory database, temporary upload store, API client with overrides."""

import io
import shutil
import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import hash_password
from app.main import app
from app.models import Base, User
from app.services.attachments import AttachmentStore, UploadPolicy, get_attachment_store

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
MAX_BYTES = 5 * 1024 * 1024
IMAGE_PATTERN = r"image/(png|jpeg|jpg|webp|gif)"


def make_store(directory: Path) -> AttachmentStore:
    return AttachmentStore(
        directory=directory,
        url_prefix="/uploads",
        policy=UploadPolicy(allowed_mime_pattern=IMAGE_PATTERN, max_bytes=MAX_BYTES),
    )


def image_upload(
    filename: str = "photo.png",
    data: bytes = PNG_BYTES,
    content_type: str = "image/png",
) -> SimpleNamespace:
    """Minimal stand-in for UploadFile (filename, content_type, file)."""
    return SimpleNamespace(filename=filename, content_type=content_type, file=io.BytesIO(data))


class DatabaseTestCase(unittest.TestCase):
    """In-memory SQLite schema and an empty upload directory per test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.upload_dir = Path(tempfile.mkdtemp(prefix="fabric-test-"))
        self.store = make_store(self.upload_dir)

    def tearDown(self) -> None:
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()
        shutil.rmtree(self.upload_dir, ignore_errors=True)

    def stored_names(self) -> set[str]:
        return {p.name for p in self.upload_dir.iterdir()} if self.upload_dir.exists() else set()

    def create_user(self, email: str, password: str = "secret", role: str = "user") -> int:
        db = self.SessionLocal()
        try:
            user = User(name=email.split("@")[0], email=email, password_hash=hash_password(password), role=role)
            db.add(user)
            db.commit()
            return user.id
        finally:
            db.close()


class ApiTestCase(DatabaseTestCase):
    """TestClient with get_db and get_attachment_store pointed at the test fixtures."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_attachment_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.clear()
        super().tearDown()

    def login(self, email: str, password: str = "secret") -> str:
        response = self.client.post("/auth/login", json={"email": email, "password": password})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    def admin_headers(self, email: str = "admin@x.com") -> dict[str, str]:
        self.create_user(email, role="admin")
        return {"Authorization": f"Bearer {self.login(email)}"}
