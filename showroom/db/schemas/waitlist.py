import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from pydantic import Field, model_validator
from showroom.utils.domains import FuelType, Priority, Transmission, WaitlistStatus
from .base import SchemaBase, PatchSchema

YEAR_RANGE_MESSAGE = "yearMin must not be greater than yearMax"


def year_range_is_ordered(year_min: Optional[int], year_max: Optional[int]) -> bool:
    return year_min is None or year_max is None or year_min <= year_max


class WaitlistPreferences(SchemaBase):
    brand_preference: str | None = None
    model_preference: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    fuel_preference: FuelType | None = None
    transmission_preference: Transmission | None = None
    max_mileage: int | None = Field(default=None, ge=0)
    max_budget: int | None = Field(default=None, ge=0)
    color_preference: str | None = None


class WaitlistRequestBase(WaitlistPreferences):
    client_id: uuid.UUID | None = None
    client_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    sms_consent: bool | None = False
    status: WaitlistStatus = WaitlistStatus.waiting
    priority: Priority = Priority.medium
    notes: str | None = None
    contact_history: str | None = None


class WaitlistRequestCreate(WaitlistRequestBase):
    @model_validator(mode="after")
    def _year_range_is_ordered(self):
        if not year_range_is_ordered(self.year_min, self.year_max):
            raise ValueError(YEAR_RANGE_MESSAGE)
        return self


class WaitlistRequestUpdate(PatchSchema, WaitlistPreferences):
    # last_contacted_at is server-managed and not writable.
    # A bound supplied alone is checked against the stored row by the repository.
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"client_name", "phone", "status", "priority"})

    client_id: uuid.UUID | None = None
    client_name: str | None = Field(default=None, min_length=1)
    phone: str | None = Field(default=None, min_length=1)
    sms_consent: bool | None = None
    status: WaitlistStatus | None = None
    priority: Priority | None = None
    notes: str | None = None
    contact_history: str | None = None

    @model_validator(mode="after")
    def _year_range_is_ordered(self):
        if not year_range_is_ordered(self.year_min, self.year_max):
            raise ValueError(YEAR_RANGE_MESSAGE)
        return self


class WaitlistRequest(WaitlistRequestBase):
    id: uuid.UUID
    created_at: datetime | None = None
    last_contacted_at: datetime | None = None
