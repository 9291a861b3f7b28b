"""Test environment: must run before any app module reads settings."""

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="fabric-uploads-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.core import security  # noqa: E402

# Full-cost hashing only slows the suite down.
security.BCRYPT_ROUNDS = 4
