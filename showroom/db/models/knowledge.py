import uuid
from sqlalchemy import Column, Text, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc
from showroom.db.types import UTCDateTime


class KnowledgeItem(Base):
    __tablename__ = 'knowledge_items'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category = Column(Text, nullable=False)
    key = Column(Text, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(UTCDateTime(), default=now_utc)
    updated_by = Column(UUID(as_uuid=True), nullable=True)
    # Insertion order for listings
    created_at = Column(UTCDateTime(), default=now_utc)

    updater = relationship("User", primaryjoin="foreign(KnowledgeItem.updated_by) == User.id", viewonly=True)

    __table_args__ = (
        Index('idx_knowledge_items_category', 'category'),
    )
