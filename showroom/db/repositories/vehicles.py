"""
Vehicle repository functions.

Inventory CRUD; `reference` is unique and duplicate writes raise
`DuplicateRecordError` instead of overwriting the existing row.
"""
from __future__ import annotations

import uuid
from typing import Optional
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from .common import commit_and_refresh, delete_by_id


def create_vehicle(db: Session, vehicle: schemas.VehicleCreate):
    db_vehicle = models.Vehicle(**vehicle.model_dump())
    db.add(db_vehicle)
    return commit_and_refresh(db, db_vehicle, entity="Vehicle", unique_field="reference")


def get_vehicle(db: Session, vehicle_id: uuid.UUID):
    return db.query(models.Vehicle).filter(models.Vehicle.id == vehicle_id).first()


def get_vehicle_by_reference(db: Session, reference: str):
    return db.query(models.Vehicle).filter(models.Vehicle.reference == reference).first()


def get_vehicles(db: Session, *, status: Optional[str] = None):
    q = db.query(models.Vehicle)
    if status:
        q = q.filter(models.Vehicle.status == status)
    return q.order_by(models.Vehicle.created_at.desc()).all()


def update_vehicle(db: Session, vehicle_id: uuid.UUID, vehicle: schemas.VehicleUpdate):
    db_vehicle = get_vehicle(db, vehicle_id)
    if db_vehicle is None:
        return None
    for key, value in vehicle.changes().items():
        setattr(db_vehicle, key, value)
    return commit_and_refresh(db, db_vehicle, entity="Vehicle", unique_field="reference")


def delete_vehicle(db: Session, vehicle_id: uuid.UUID) -> bool:
    return delete_by_id(db, models.Vehicle, vehicle_id, entity="Vehicle")
