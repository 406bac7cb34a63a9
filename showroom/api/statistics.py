"""
Statistics API endpoints (read-only).

`/statistics` returns the raw daily rows; `/statistics/summary` is a
separate aggregate view that does not read those rows.
"""
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import stats as stats_repo
from showroom.services.statistics import get_summary

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=List[schemas.DailyStats])
def list_daily_stats(
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    return stats_repo.get_daily_stats(db, start_date=start_date, end_date=end_date)


@router.get("/summary", response_model=schemas.StatisticsSummary)
def statistics_summary():
    return get_summary()
