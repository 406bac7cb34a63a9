"""
Clients API endpoints.

No delete route: clients stay referenced by email cases and waitlist
requests.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import clients as client_repo
from showroom.api.errors import not_found

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", response_model=List[schemas.Client])
def list_clients(db: Session = Depends(get_db)):
    return client_repo.get_clients(db)


@router.get("/{client_id}", response_model=schemas.Client)
def get_client(client_id: uuid.UUID, db: Session = Depends(get_db)):
    db_client = client_repo.get_client(db, client_id)
    if db_client is None:
        raise not_found("Client")
    return db_client


@router.post("", response_model=schemas.Client, status_code=status.HTTP_201_CREATED)
def create_client(client: schemas.ClientCreate, db: Session = Depends(get_db)):
    return client_repo.create_client(db, client)


@router.patch("/{client_id}", response_model=schemas.Client)
def update_client(
    client_id: uuid.UUID,
    client_update: schemas.ClientUpdate,
    db: Session = Depends(get_db),
):
    updated = client_repo.update_client(db, client_id, client_update)
    if updated is None:
        raise not_found("Client")
    return updated
