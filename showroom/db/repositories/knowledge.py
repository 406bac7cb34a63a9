"""
Knowledge base repository functions.

Every update refreshes ``updated_at``; the new value is always strictly
greater than the stored one, even when the clock has not advanced.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from .common import commit_and_refresh, delete_by_id

_TICK = timedelta(microseconds=1)


def _next_updated_at(previous: Optional[datetime]) -> datetime:
    stamp = models.now_utc()
    if previous is not None and stamp <= previous:
        stamp = previous + _TICK
    return stamp


def create_knowledge_item(db: Session, item: schemas.KnowledgeItemCreate):
    db_item = models.KnowledgeItem(**item.model_dump())
    db.add(db_item)
    return commit_and_refresh(db, db_item, entity="KnowledgeItem")


def get_knowledge_item(db: Session, item_id: uuid.UUID):
    return db.query(models.KnowledgeItem).filter(models.KnowledgeItem.id == item_id).first()


def get_knowledge_items(db: Session, *, category: Optional[str] = None):
    q = db.query(models.KnowledgeItem)
    if category:
        q = q.filter(models.KnowledgeItem.category == category)
    return q.order_by(models.KnowledgeItem.created_at.asc()).all()


def update_knowledge_item(db: Session, item_id: uuid.UUID, item: schemas.KnowledgeItemUpdate):
    db_item = get_knowledge_item(db, item_id)
    if db_item is None:
        return None
    for key, value in item.changes().items():
        setattr(db_item, key, value)
    db_item.updated_at = _next_updated_at(db_item.updated_at)
    return commit_and_refresh(db, db_item, entity="KnowledgeItem")


def delete_knowledge_item(db: Session, item_id: uuid.UUID) -> bool:
    return delete_by_id(db, models.KnowledgeItem, item_id, entity="KnowledgeItem")
