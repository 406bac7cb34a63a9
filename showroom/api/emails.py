"""
Email inbox API endpoints.

CRUD for email cases with status / priority / needs-human list filters.
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import emails as email_repo
from showroom.api.errors import not_found

router = APIRouter(prefix="/emails", tags=["emails"])


def _parse_needs_human(raw: Optional[str]) -> Optional[bool]:
    # Only the literal "true" selects flagged cases; any other value selects the rest
    if raw is None:
        return None
    return raw.strip().lower() == "true"


@router.get("", response_model=List[schemas.EmailCase])
def list_email_cases(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    priority: Optional[str] = None,
    needs_human: Optional[str] = Query(default=None, alias="needsHuman"),
    db: Session = Depends(get_db),
):
    return email_repo.get_email_cases(
        db,
        status=status_filter,
        priority=priority,
        needs_human=_parse_needs_human(needs_human),
    )


@router.get("/{email_id}", response_model=schemas.EmailCase)
def get_email_case(email_id: uuid.UUID, db: Session = Depends(get_db)):
    db_email = email_repo.get_email_case(db, email_id)
    if db_email is None:
        raise not_found("Email")
    return db_email


@router.post("", response_model=schemas.EmailCase, status_code=status.HTTP_201_CREATED)
def create_email_case(email_case: schemas.EmailCaseCreate, db: Session = Depends(get_db)):
    return email_repo.create_email_case(db, email_case)


@router.patch("/{email_id}", response_model=schemas.EmailCase)
def update_email_case(
    email_id: uuid.UUID,
    email_update: schemas.EmailCaseUpdate,
    db: Session = Depends(get_db),
):
    updated = email_repo.update_email_case(db, email_id, email_update)
    if updated is None:
        raise not_found("Email")
    return updated


@router.delete("/{email_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_email_case(email_id: uuid.UUID, db: Session = Depends(get_db)):
    email_repo.delete_email_case(db, email_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
