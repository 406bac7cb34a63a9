import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet
from pydantic import Field
from .base import SchemaBase, PatchSchema


class DailyStatsBase(SchemaBase):
    date: datetime
    total_emails: int | None = Field(default=0, ge=0)
    ai_responses: int | None = Field(default=0, ge=0)
    human_escalations: int | None = Field(default=0, ge=0)
    avg_response_time_minutes: int | None = Field(default=None, ge=0)
    total_calls: int | None = Field(default=0, ge=0)
    ai_handled_calls: int | None = Field(default=0, ge=0)
    transferred_calls: int | None = Field(default=0, ge=0)
    avg_call_duration_seconds: int | None = Field(default=None, ge=0)
    waitlist_conversions: int | None = Field(default=0, ge=0)


class DailyStatsCreate(DailyStatsBase):
    pass


class DailyStatsUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"date"})

    date: datetime | None = None
    total_emails: int | None = Field(default=None, ge=0)
    ai_responses: int | None = Field(default=None, ge=0)
    human_escalations: int | None = Field(default=None, ge=0)
    avg_response_time_minutes: int | None = Field(default=None, ge=0)
    total_calls: int | None = Field(default=None, ge=0)
    ai_handled_calls: int | None = Field(default=None, ge=0)
    transferred_calls: int | None = Field(default=None, ge=0)
    avg_call_duration_seconds: int | None = Field(default=None, ge=0)
    waitlist_conversions: int | None = Field(default=None, ge=0)


class DailyStats(DailyStatsBase):
    id: uuid.UUID


class EmailSummary(SchemaBase):
    total: int
    ai_responses: int
    human_escalations: int
    avg_response_time_minutes: int


class CallSummary(SchemaBase):
    total: int
    ai_handled: int
    transferred: int
    avg_duration_seconds: int


class WaitlistSummary(SchemaBase):
    total: int
    conversions: int
    conversion_rate: float


class StatisticsSummary(SchemaBase):
    emails: EmailSummary
    calls: CallSummary
    waitlist: WaitlistSummary
