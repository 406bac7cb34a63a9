import uuid
from sqlalchemy import Column, Text, Boolean, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from showroom.db.types import UTCDateTime


class Client(Base):
    __tablename__ = 'clients'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    sms_consent = Column(Boolean, default=False)
    notes = Column(Text, nullable=True)
    created_at = Column(UTCDateTime(), default=now_utc)

    # Weak back-references: dependents keep their client_id when a client goes away
    email_cases = relationship(
        "EmailCase",
        primaryjoin="Client.id == foreign(EmailCase.client_id)",
        viewonly=True,
    )
    waitlist_requests = relationship(
        "WaitlistRequest",
        primaryjoin="Client.id == foreign(WaitlistRequest.client_id)",
        viewonly=True,
    )

    __table_args__ = (
        Index('idx_clients_created_at', 'created_at'),
    )
