"""
Commit helpers shared by the repository modules.

Every repository mutation is a single commit; on failure the session is
rolled back so the request-scoped session stays usable, and unique
constraint violations are surfaced as `DuplicateRecordError`.
"""
from __future__ import annotations

import logging
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNIQUE_MARKERS = ("unique constraint", "duplicate key", "unique_violation")


class DuplicateRecordError(RuntimeError):
    """Raised when a write would break a uniqueness invariant."""

    def __init__(self, entity: str, field: str, value=None):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with this {field} already exists")


class InvalidRecordError(ValueError):
    """Raised when merging a partial update with the stored row breaks a cross-field rule."""

    def __init__(self, entity: str, field: str, message: str):
        self.entity = entity
        self.field = field
        self.message = message
        super().__init__(message)


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(getattr(exc, "orig", exc) or "").lower()
    return any(marker in message for marker in _UNIQUE_MARKERS)


def commit_and_refresh(
    db: Session,
    instance: T,
    *,
    entity: str,
    unique_field: str | None = None,
) -> T:
    """Commit the pending unit of work and reload ``instance``."""
    attempted = getattr(instance, unique_field, None) if unique_field else None
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if unique_field and is_unique_violation(exc):
            raise DuplicateRecordError(entity, unique_field, attempted) from exc
        raise
    except SQLAlchemyError:
        db.rollback()
        logger.exception("commit_failed: entity=%s", entity)
        raise
    db.refresh(instance)
    return instance


def delete_by_id(db: Session, model, record_id, *, entity: str) -> bool:
    """Delete a row by primary key. Missing rows are not an error.

    Returns True when a row was removed.
    """
    if record_id is None:
        return False
    try:
        removed = (
            db.query(model)
            .filter(model.id == record_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("delete_failed: entity=%s id=%s", entity, record_id)
        raise
    return bool(removed)
