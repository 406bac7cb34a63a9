import uuid
from sqlalchemy import Column, String, Text, Boolean, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from showroom.db.types import StringArray, UTCDateTime
from showroom.utils.domains import EmailStatus, Priority, check_in


class EmailCase(Base):
    __tablename__ = 'email_cases'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # References below are weak: plain ids without foreign key constraints
    client_id = Column(UUID(as_uuid=True), nullable=True)
    subject = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    sender_email = Column(Text, nullable=False)
    sender_name = Column(Text, nullable=True)
    attachments = Column(StringArray(), nullable=True)
    status = Column(String(20), nullable=False, default=EmailStatus.new.value)
    priority = Column(String(20), nullable=False, default=Priority.medium.value)
    ai_reason = Column(Text, nullable=True)
    needs_human = Column(Boolean, default=True)
    assigned_to = Column(UUID(as_uuid=True), nullable=True)
    vehicle_id = Column(UUID(as_uuid=True), nullable=True)
    internal_notes = Column(Text, nullable=True)
    draft_response = Column(Text, nullable=True)
    received_at = Column(UTCDateTime(), default=now_utc)
    replied_at = Column(UTCDateTime(), nullable=True)

    client = relationship("Client", primaryjoin="foreign(EmailCase.client_id) == Client.id", viewonly=True)
    assignee = relationship("User", primaryjoin="foreign(EmailCase.assigned_to) == User.id", viewonly=True)
    vehicle = relationship("Vehicle", primaryjoin="foreign(EmailCase.vehicle_id) == Vehicle.id", viewonly=True)

    __table_args__ = (
        Index('idx_email_cases_received_at', 'received_at'),
        Index('idx_email_cases_status_priority', 'status', 'priority'),
        Index('idx_email_cases_client_id', 'client_id'),
        Index('idx_email_cases_assigned_to', 'assigned_to'),
        Index('idx_email_cases_vehicle_id', 'vehicle_id'),
        CheckConstraint(check_in('status', EmailStatus), name='ck_email_cases_status'),
        CheckConstraint(check_in('priority', Priority), name='ck_email_cases_priority'),
    )
