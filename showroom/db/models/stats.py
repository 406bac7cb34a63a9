import uuid
from sqlalchemy import Column, Integer, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from .base import Base
from showroom.db.types import UTCDateTime

COUNTER_COLUMNS = (
    'total_emails',
    'ai_responses',
    'human_escalations',
    'avg_response_time_minutes',
    'total_calls',
    'ai_handled_calls',
    'transferred_calls',
    'avg_call_duration_seconds',
    'waitlist_conversions',
)


class DailyStats(Base):
    __tablename__ = 'daily_stats'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(UTCDateTime(), nullable=False)
    total_emails = Column(Integer, default=0)
    ai_responses = Column(Integer, default=0)
    human_escalations = Column(Integer, default=0)
    avg_response_time_minutes = Column(Integer, nullable=True)
    total_calls = Column(Integer, default=0)
    ai_handled_calls = Column(Integer, default=0)
    transferred_calls = Column(Integer, default=0)
    avg_call_duration_seconds = Column(Integer, nullable=True)
    waitlist_conversions = Column(Integer, default=0)

    __table_args__ = (
        Index('idx_daily_stats_date', 'date'),
        *(
            CheckConstraint(f'{col} IS NULL OR {col} >= 0', name=f'ck_daily_stats_{col}_non_negative')
            for col in COUNTER_COLUMNS
        ),
    )
