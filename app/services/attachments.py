"""Attached-file store: validated image uploads written under generated names, served under a URL prefix."""

import logging
import re
import secrets
import time
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import BinaryIO, Protocol

from app.core.config import get_settings
from app.core.errors import RejectedUpload

logger = logging.getLogger(__name__)

# Extensions longer than this (or with odd characters) are dropped from generated names.
MAX_EXTENSION_LEN = 10
_EXTENSION_RE = re.compile(r"^\.[a-z0-9]+$")


class Upload(Protocol):
    """What the store needs from an upload (FastAPI's UploadFile satisfies it)."""

    filename: str | None
    content_type: str | None
    file: BinaryIO


@dataclass(frozen=True)
class UploadPolicy:
    """Which uploads are accepted: media type whitelist and byte ceiling."""

    allowed_mime_pattern: str
    max_bytes: int

    def allows_media_type(self, content_type: str | None) -> bool:
        media_type = (content_type or "").split(";")[0].strip().lower()
        return re.fullmatch(self.allowed_mime_pattern, media_type) is not None


@dataclass(frozen=True)
class StoredFile:
    """Handle to a file written by the store."""

    filename: str
    path: Path
    url: str


def _extension(original_filename: str | None) -> str:
    suffix = Path(original_filename or "").suffix.lower()
    if len(suffix) > MAX_EXTENSION_LEN or not _EXTENSION_RE.match(suffix):
        return ""
    return suffix


def generate_filename(original_filename: str | None) -> str:
    """<epoch millis>-<random 0..1e9><original extension>, e.g. 1718000000000-123456789.png"""
    millis = int(time.time() * 1000)
    return f"{millis}-{secrets.randbelow(1_000_000_000)}{_extension(original_filename)}"


class AttachmentStore:
    """
    Content directory for entity attachments.

    Files are written once under a fresh name and never modified; a row owns
    at most one file and the file is deleted only after the row stops
    referencing it. The directory is created lazily on first write.
    """

    def __init__(self, directory: Path, url_prefix: str, policy: UploadPolicy) -> None:
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip("/")
        self.policy = policy

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def accept(self, upload: Upload) -> StoredFile:
        """
        Validate and persist an upload.

        Raises RejectedUpload before anything is written when the media type is
        not allowed or the payload exceeds the byte ceiling.
        """
        if not self.policy.allows_media_type(upload.content_type):
            logger.info(
                "Rejected upload %r: media type %r not allowed",
                upload.filename,
                upload.content_type,
            )
            raise RejectedUpload("Only image files are allowed")
        content = upload.file.read(self.policy.max_bytes + 1)
        if len(content) > self.policy.max_bytes:
            logger.info("Rejected upload %r: larger than %s bytes", upload.filename, self.policy.max_bytes)
            raise RejectedUpload(
                f"File size must not exceed {self.policy.max_bytes // (1024 * 1024)} MB."
            )

        self.ensure_directory()
        while True:
            filename = generate_filename(upload.filename)
            path = self.directory / filename
            try:
                with open(path, "xb") as fh:
                    fh.write(content)
                break
            except FileExistsError:
                continue
            except OSError:
                self.delete(path)
                raise
        logger.debug("Stored upload %r as %s (%s bytes)", upload.filename, filename, len(content))
        return StoredFile(filename=filename, path=path, url=self.public_url(filename))

    def public_url(self, filename: str | None) -> str | None:
        """Public path for a stored filename; None for no file."""
        if not filename:
            return None
        return f"{self.url_prefix}/{filename}"

    def path_for_url(self, url: str | None) -> Path | None:
        """On-disk path for a public URL. Only the basename is used, so no traversal is possible."""
        if not url:
            return None
        name = Path(url).name
        if not name or name in (".", ".."):
            return None
        return self.directory / name

    def delete(self, path: Path | None) -> None:
        """Best-effort delete: a missing file is fine, other errors are logged and swallowed."""
        if path is None:
            return
        try:
            Path(path).unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not delete stored file %s", path, exc_info=True)

    def delete_url(self, url: str | None) -> None:
        self.delete(self.path_for_url(url))

    def stored_files(self) -> Iterator[Path]:
        """Regular files currently in the store directory."""
        if not self.directory.is_dir():
            return
        for path in sorted(self.directory.iterdir()):
            if path.is_file():
                yield path


@lru_cache
def get_attachment_store() -> AttachmentStore:
    """Dependency: the process-wide store configured from settings."""
    settings = get_settings()
    return AttachmentStore(
        directory=Path(settings.UPLOAD_DIR),
        url_prefix=settings.UPLOAD_URL_PREFIX,
        policy=UploadPolicy(
            allowed_mime_pattern=settings.UPLOAD_ALLOWED_MIME_PATTERN,
            max_bytes=settings.UPLOAD_MAX_BYTES,
        ),
    )
