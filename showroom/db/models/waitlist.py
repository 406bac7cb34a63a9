import uuid
from sqlalchemy import Column, String, Text, Integer, Boolean, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from showroom.db.types import UTCDateTime
from showroom.utils.domains import FuelType, Priority, Transmission, WaitlistStatus, check_in


class WaitlistRequest(Base):
    __tablename__ = 'waitlist_requests'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), nullable=True)
    client_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    sms_consent = Column(Boolean, default=False)
    status = Column(String(20), nullable=False, default=WaitlistStatus.waiting.value)
    priority = Column(String(20), nullable=False, default=Priority.medium.value)
    # Vehicle preferences
    brand_preference = Column(Text, nullable=True)
    model_preference = Column(Text, nullable=True)
    year_min = Column(Integer, nullable=True)
    year_max = Column(Integer, nullable=True)
    fuel_preference = Column(String(20), nullable=True)
    transmission_preference = Column(String(20), nullable=True)
    max_mileage = Column(Integer, nullable=True)
    max_budget = Column(Integer, nullable=True)
    color_preference = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    contact_history = Column(Text, nullable=True)
    created_at = Column(UTCDateTime(), default=now_utc)
    last_contacted_at = Column(UTCDateTime(), nullable=True)

    client = relationship("Client", primaryjoin="foreign(WaitlistRequest.client_id) == Client.id", viewonly=True)

    __table_args__ = (
        Index('idx_waitlist_requests_status', 'status'),
        Index('idx_waitlist_requests_created_at', 'created_at'),
        Index('idx_waitlist_requests_client_id', 'client_id'),
        CheckConstraint(check_in('status', WaitlistStatus), name='ck_waitlist_requests_status'),
        CheckConstraint(check_in('priority', Priority), name='ck_waitlist_requests_priority'),
        CheckConstraint(
            f"fuel_preference IS NULL OR {check_in('fuel_preference', FuelType)}",
            name='ck_waitlist_requests_fuel_preference',
        ),
        CheckConstraint(
            f"transmission_preference IS NULL OR {check_in('transmission_preference', Transmission)}",
            name='ck_waitlist_requests_transmission_preference',
        ),
    )
