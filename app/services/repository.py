"""Generic repository for soft-deletable tables keyed by an integer id."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, update
from sqlalchemy.orm import Session

from app.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepository(Generic[ModelT]):
    """
    Row access for one model. Reads and updates only see live rows
    (deleted_at IS NULL). Nothing here commits; the caller owns the transaction.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def _live(self, db: Session):
        return db.query(self.model).filter(self.model.deleted_at.is_(None))

    def list_live(self, db: Session) -> list[ModelT]:
        return self._live(db).order_by(self.model.id).all()

    def get_live(self, db: Session, entity_id: int) -> ModelT | None:
        return self._live(db).filter(self.model.id == entity_id).first()

    def get_any(self, db: Session, entity_id: int) -> ModelT | None:
        """Row by id including soft-deleted ones."""
        return db.get(self.model, entity_id)

    def insert(self, db: Session, values: dict[str, Any]) -> ModelT:
        row = self.model(**values)
        db.add(row)
        db.flush()
        return row

    def update_fields(self, db: Session, entity_id: int, values: dict[str, Any]) -> int:
        """
        Set only the given columns on a live row; every other column keeps its
        stored value. Returns the number of rows affected (0 or 1).
        """
        result = db.execute(
            update(self.model)
            .where(self.model.id == entity_id, self.model.deleted_at.is_(None))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def mark_deleted(self, db: Session, entity_id: int) -> int:
        result = db.execute(
            update(self.model)
            .where(self.model.id == entity_id, self.model.deleted_at.is_(None))
            .values(deleted_at=func.now())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete(self, db: Session, row: ModelT) -> None:
        db.delete(row)
        db.flush()
