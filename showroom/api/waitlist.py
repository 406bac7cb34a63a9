"""
Waitlist API endpoints.
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import waitlist as waitlist_repo
from showroom.api.errors import not_found

router = APIRouter(prefix="/waitlist", tags=["waitlist"])


@router.get("", response_model=List[schemas.WaitlistRequest])
def list_waitlist_requests(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
):
    return waitlist_repo.get_waitlist_requests(db, status=status_filter)


@router.get("/{request_id}", response_model=schemas.WaitlistRequest)
def get_waitlist_request(request_id: uuid.UUID, db: Session = Depends(get_db)):
    db_request = waitlist_repo.get_waitlist_request(db, request_id)
    if db_request is None:
        raise not_found("Waitlist request")
    return db_request


@router.post("", response_model=schemas.WaitlistRequest, status_code=status.HTTP_201_CREATED)
def create_waitlist_request(request: schemas.WaitlistRequestCreate, db: Session = Depends(get_db)):
    return waitlist_repo.create_waitlist_request(db, request)


@router.patch("/{request_id}", response_model=schemas.WaitlistRequest)
def update_waitlist_request(
    request_id: uuid.UUID,
    request_update: schemas.WaitlistRequestUpdate,
    db: Session = Depends(get_db),
):
    updated = waitlist_repo.update_waitlist_request(db, request_id, request_update)
    if updated is None:
        raise not_found("Waitlist request")
    return updated


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_waitlist_request(request_id: uuid.UUID, db: Session = Depends(get_db)):
    waitlist_repo.delete_waitlist_request(db, request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
