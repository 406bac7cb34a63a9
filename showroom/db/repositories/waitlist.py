"""
Waitlist repository functions.

Setting ``status`` to ``contacted`` stamps ``last_contacted_at`` in the
same commit; no other transition touches it.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from showroom.utils.domains import WaitlistStatus
from .common import InvalidRecordError, commit_and_refresh, delete_by_id


def _stamp_contact(changes: dict) -> dict:
    if changes.get("status") == WaitlistStatus.contacted.value:
        changes["last_contacted_at"] = models.now_utc()
    return changes


def _check_year_range(db_request, changes: dict) -> None:
    """Validate the year bounds the row would hold once ``changes`` are applied."""
    year_min = changes.get("year_min", db_request.year_min)
    year_max = changes.get("year_max", db_request.year_max)
    if not schemas.year_range_is_ordered(year_min, year_max):
        field = "yearMin" if "year_min" in changes else "yearMax"
        raise InvalidRecordError("WaitlistRequest", field, schemas.YEAR_RANGE_MESSAGE)


def create_waitlist_request(db: Session, request: schemas.WaitlistRequestCreate):
    db_request = models.WaitlistRequest(**request.model_dump())
    db.add(db_request)
    return commit_and_refresh(db, db_request, entity="WaitlistRequest")


def get_waitlist_request(db: Session, request_id: uuid.UUID):
    return db.query(models.WaitlistRequest).filter(models.WaitlistRequest.id == request_id).first()


def get_waitlist_requests(db: Session, *, status: Optional[str] = None):
    q = db.query(models.WaitlistRequest)
    if status:
        q = q.filter(models.WaitlistRequest.status == status)
    return q.order_by(models.WaitlistRequest.created_at.desc()).all()


def update_waitlist_request(db: Session, request_id: uuid.UUID, request: schemas.WaitlistRequestUpdate):
    db_request = get_waitlist_request(db, request_id)
    if db_request is None:
        return None
    changes = request.changes()
    _check_year_range(db_request, changes)
    for key, value in _stamp_contact(changes).items():
        setattr(db_request, key, value)
    return commit_and_refresh(db, db_request, entity="WaitlistRequest")


def delete_waitlist_request(db: Session, request_id: uuid.UUID) -> bool:
    return delete_by_id(db, models.WaitlistRequest, request_id, entity="WaitlistRequest")
