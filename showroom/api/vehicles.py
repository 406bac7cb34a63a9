"""
Vehicle inventory API endpoints.
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import vehicles as vehicle_repo
from showroom.db.repositories.common import DuplicateRecordError
from showroom.api.errors import conflict, not_found

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("", response_model=List[schemas.Vehicle])
def list_vehicles(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
):
    return vehicle_repo.get_vehicles(db, status=status_filter)


@router.get("/{vehicle_id}", response_model=schemas.Vehicle)
def get_vehicle(vehicle_id: uuid.UUID, db: Session = Depends(get_db)):
    db_vehicle = vehicle_repo.get_vehicle(db, vehicle_id)
    if db_vehicle is None:
        raise not_found("Vehicle")
    return db_vehicle


@router.post("", response_model=schemas.Vehicle, status_code=status.HTTP_201_CREATED)
def create_vehicle(vehicle: schemas.VehicleCreate, db: Session = Depends(get_db)):
    if vehicle_repo.get_vehicle_by_reference(db, vehicle.reference) is not None:
        raise conflict(DuplicateRecordError("Vehicle", "reference", vehicle.reference))
    return vehicle_repo.create_vehicle(db, vehicle)


@router.patch("/{vehicle_id}", response_model=schemas.Vehicle)
def update_vehicle(
    vehicle_id: uuid.UUID,
    vehicle_update: schemas.VehicleUpdate,
    db: Session = Depends(get_db),
):
    updated = vehicle_repo.update_vehicle(db, vehicle_id, vehicle_update)
    if updated is None:
        raise not_found("Vehicle")
    return updated


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_vehicle(vehicle_id: uuid.UUID, db: Session = Depends(get_db)):
    vehicle_repo.delete_vehicle(db, vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
