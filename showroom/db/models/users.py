import uuid
from sqlalchemy import Column, String, Text, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc
from showroom.db.types import UTCDateTime
from showroom.utils.domains import UserRole, check_in


class User(Base):
    __tablename__ = 'users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(Text, nullable=False)
    # bcrypt hash; never exposed by any response schema
    password = Column(Text, nullable=False)
    display_name = Column(Text, nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.seller.value)
    # Insertion order for listings
    created_at = Column(UTCDateTime(), default=now_utc)

    __table_args__ = (
        Index('ix_users_username', 'username', unique=True),
        CheckConstraint(check_in('role', UserRole), name='ck_users_role'),
    )
