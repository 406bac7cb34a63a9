"""
Email case repository functions.

Implements the inbox queries (status / priority / needs-human filters,
newest first) and the reply hook: any update that sets ``status`` to
``replied`` stamps ``replied_at`` in the same commit.
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from showroom.utils.domains import EmailStatus
from .common import commit_and_refresh, delete_by_id

logger = logging.getLogger(__name__)


def _stamp_reply(changes: dict) -> dict:
    """Set ``replied_at`` when this payload moves the case to replied."""
    if changes.get("status") == EmailStatus.replied.value:
        changes["replied_at"] = models.now_utc()
    return changes


def create_email_case(db: Session, email_case: schemas.EmailCaseCreate):
    db_email = models.EmailCase(**email_case.model_dump())
    db.add(db_email)
    return commit_and_refresh(db, db_email, entity="EmailCase")


def get_email_case(db: Session, email_id: uuid.UUID):
    return db.query(models.EmailCase).filter(models.EmailCase.id == email_id).first()


def get_email_cases(
    db: Session,
    *,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    needs_human: Optional[bool] = None,
):
    """List email cases newest first; filters combine with AND."""
    q = db.query(models.EmailCase)
    if status:
        q = q.filter(models.EmailCase.status == status)
    if priority:
        q = q.filter(models.EmailCase.priority == priority)
    if needs_human is not None:
        q = q.filter(models.EmailCase.needs_human == needs_human)
    return q.order_by(models.EmailCase.received_at.desc()).all()


def update_email_case(db: Session, email_id: uuid.UUID, email_case: schemas.EmailCaseUpdate):
    db_email = get_email_case(db, email_id)
    if db_email is None:
        return None
    changes = _stamp_reply(email_case.changes())
    for key, value in changes.items():
        setattr(db_email, key, value)
    if "replied_at" in changes:
        logger.info("email_case_replied", extra={"email_case_id": str(email_id)})
    return commit_and_refresh(db, db_email, entity="EmailCase")


def delete_email_case(db: Session, email_id: uuid.UUID) -> bool:
    return delete_by_id(db, models.EmailCase, email_id, entity="EmailCase")
