"""
Daily statistics repository functions.

Rows are produced by an external analytics job; the API only reads them.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from .common import commit_and_refresh


def create_daily_stats(db: Session, stats: schemas.DailyStatsCreate):
    db_stats = models.DailyStats(**stats.model_dump())
    db.add(db_stats)
    return commit_and_refresh(db, db_stats, entity="DailyStats")


def get_daily_stats_entry(db: Session, stats_id: uuid.UUID):
    return db.query(models.DailyStats).filter(models.DailyStats.id == stats_id).first()


def get_daily_stats(
    db: Session,
    *,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
):
    """List daily rows newest first, optionally bounded (inclusive) by date."""
    q = db.query(models.DailyStats)
    if start_date is not None:
        q = q.filter(models.DailyStats.date >= start_date)
    if end_date is not None:
        q = q.filter(models.DailyStats.date <= end_date)
    return q.order_by(models.DailyStats.date.desc()).all()


def update_daily_stats(db: Session, stats_id: uuid.UUID, stats: schemas.DailyStatsUpdate):
    db_stats = get_daily_stats_entry(db, stats_id)
    if db_stats is None:
        return None
    for key, value in stats.changes().items():
        setattr(db_stats, key, value)
    return commit_and_refresh(db, db_stats, entity="DailyStats")
