import uuid
from sqlalchemy import Column, String, Text, Integer, Boolean, Index, CheckConstraint, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc
from showroom.db.types import StringArray, UTCDateTime
from showroom.utils.domains import FuelType, Transmission, VehicleStatus, check_in


class Vehicle(Base):
    __tablename__ = 'vehicles'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    reference = Column(Text, nullable=False)
    brand = Column(Text, nullable=False)
    model = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    fuel = Column(String(20), nullable=False)
    transmission = Column(String(20), nullable=False)
    mileage = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    color = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=VehicleStatus.available.value)
    # Whether the external assistant may offer this vehicle
    ai_usable = Column(Boolean, default=True)
    description = Column(Text, nullable=True)
    photos = Column(StringArray(), nullable=True)
    internal_notes = Column(Text, nullable=True)
    created_at = Column(UTCDateTime(), default=now_utc)

    __table_args__ = (
        UniqueConstraint('reference', name='uq_vehicles_reference'),
        Index('idx_vehicles_status', 'status'),
        Index('idx_vehicles_created_at', 'created_at'),
        CheckConstraint(check_in('fuel', FuelType), name='ck_vehicles_fuel'),
        CheckConstraint(check_in('transmission', Transmission), name='ck_vehicles_transmission'),
        CheckConstraint(check_in('status', VehicleStatus), name='ck_vehicles_status'),
        CheckConstraint('mileage >= 0', name='ck_vehicles_mileage_non_negative'),
        CheckConstraint('price >= 0', name='ck_vehicles_price_non_negative'),
    )
