"""
Create/update/delete of rows that own an attached file.

The file store is not transactional with the database, so every operation
follows one ordering rule: a file is written before the row that will
reference it, and a file is deleted only after the commit that stops
referencing it. A crash or failure can therefore leave at most an orphaned
file on disk, never a row pointing at a missing file.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import NoChange, NotFound, ValidationError
from app.services.attachments import AttachmentStore, StoredFile, Upload
from app.services.repository import EntityRepository, ModelT

logger = logging.getLogger(__name__)

ATTACHMENT_COLUMN = "image"


def describe_validation_error(exc: PydanticValidationError) -> str:
    """One-line, user-facing summary of a pydantic validation failure."""
    missing = [
        ".".join(str(part) for part in err["loc"])
        for err in exc.errors()
        if err["type"] == "missing"
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"])
    return f"{field}: {err['msg']}" if field else err["msg"]


class AttachmentCoordinator(Generic[ModelT]):
    """
    Mutation protocol for one entity type bound to the shared attachment store.

    create_schema validates the form on create (required fields), update_schema
    the partial form on update. to_columns maps validated fields to column
    values (e.g. hashing a password); identity by default.
    """

    def __init__(
        self,
        model: type[ModelT],
        store: AttachmentStore,
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
        label: str,
        to_columns: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    ) -> None:
        self.repository: EntityRepository[ModelT] = EntityRepository(model)
        self.store = store
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.label = label
        self.to_columns = to_columns or (lambda values: values)

    def list_live(self, db: Session) -> list[ModelT]:
        return self.repository.list_live(db)

    def get(self, db: Session, entity_id: int) -> ModelT:
        row = self.repository.get_live(db, entity_id)
        if row is None:
            raise NotFound(f"{self.label} not found")
        return row

    def create(
        self,
        db: Session,
        fields: dict[str, Any],
        upload: Upload | None = None,
    ) -> ModelT:
        """
        Stage the upload, validate, insert, commit.

        Any failure after staging (missing fields, constraint violation,
        database error) rolls back and removes the staged file before the
        error propagates.
        """
        staged = self._stage(upload)
        try:
            values = self._validate(self.create_schema, fields, partial=False)
            if staged is not None:
                values[ATTACHMENT_COLUMN] = staged.url
            row = self.repository.insert(db, values)
            db.commit()
        except IntegrityError as e:
            self._abort(db, staged)
            raise ValidationError(f"{self.label} conflicts with an existing record") from e
        except Exception:
            self._abort(db, staged)
            raise
        db.refresh(row)
        logger.info("Created %s id=%s image=%s", self.label, row.id, getattr(row, ATTACHMENT_COLUMN))
        return row

    def update(
        self,
        db: Session,
        entity_id: int,
        fields: dict[str, Any],
        upload: Upload | None = None,
    ) -> ModelT:
        """
        Partially update a live row and optionally replace its attachment.

        Order: stage new file, read current row, guarded update of the provided
        fields (plus image if a file was staged), commit, and only then delete
        the superseded file. Omitted fields keep their stored values.
        """
        staged = self._stage(upload)
        try:
            values = self._validate(self.update_schema, fields, partial=True)
            current = self.repository.get_live(db, entity_id)
            if current is None:
                raise NotFound(f"{self.label} not found")
            previous_url = getattr(current, ATTACHMENT_COLUMN)
            if staged is not None:
                values[ATTACHMENT_COLUMN] = staged.url
            if values:
                if not self.repository.update_fields(db, entity_id, values):
                    raise NoChange()
            db.commit()
        except IntegrityError as e:
            self._abort(db, staged)
            raise ValidationError(f"{self.label} conflicts with an existing record") from e
        except Exception:
            self._abort(db, staged)
            raise

        if staged is not None and previous_url and previous_url != staged.url:
            self.store.delete_url(previous_url)
        db.refresh(current)
        logger.info("Updated %s id=%s fields=%s", self.label, entity_id, sorted(values))
        return current

    def soft_delete(self, db: Session, entity_id: int) -> None:
        """Mark a live row deleted. Its attachment stays on disk."""
        try:
            if not self.repository.mark_deleted(db, entity_id):
                raise NotFound(f"{self.label} not found")
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info("Soft-deleted %s id=%s", self.label, entity_id)

    def hard_delete(self, db: Session, entity_id: int) -> None:
        """Remove the row (live or soft-deleted) and, after the commit, its attachment."""
        try:
            row = self.repository.get_any(db, entity_id)
            if row is None:
                raise NotFound(f"{self.label} not found")
            attachment_url = getattr(row, ATTACHMENT_COLUMN)
            self.repository.delete(db, row)
            db.commit()
        except Exception:
            db.rollback()
            raise
        self.store.delete_url(attachment_url)
        logger.info("Deleted %s id=%s", self.label, entity_id)

    def _stage(self, upload: Upload | None) -> StoredFile | None:
        if upload is None or not upload.filename:
            return None
        return self.store.accept(upload)

    def _validate(
        self,
        schema: type[BaseModel],
        fields: dict[str, Any],
        partial: bool,
    ) -> dict[str, Any]:
        provided = {k: v for k, v in fields.items() if v is not None}
        try:
            model = schema.model_validate(provided)
        except PydanticValidationError as e:
            raise ValidationError(describe_validation_error(e)) from e
        return self.to_columns(model.model_dump(exclude_unset=partial))

    def _abort(self, db: Session, staged: StoredFile | None) -> None:
        """Roll back the request transaction and drop a file that will never be referenced."""
        db.rollback()
        if staged is not None:
            logger.info("Discarding staged upload %s", staged.filename)
            self.store.delete(staged.path)
