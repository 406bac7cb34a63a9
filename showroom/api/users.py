"""
Users API endpoints.

Every response goes through `schemas.User`, which has no password field,
so the credential can never be serialized. Password changes are not
accepted on PATCH; the field is dropped before the repository sees it.
"""
from typing import List
import uuid
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import users as user_repo
from showroom.db.repositories.common import DuplicateRecordError
from showroom.api.errors import conflict, not_found

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[schemas.User])
def list_users(db: Session = Depends(get_db)):
    return user_repo.get_users(db)


@router.get("/{user_id}", response_model=schemas.User)
def get_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    db_user = user_repo.get_user(db, user_id)
    if db_user is None:
        raise not_found("User")
    return db_user


@router.post("", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    if user_repo.get_user_by_username(db, user.username) is not None:
        raise conflict(DuplicateRecordError("User", "username", user.username))
    return user_repo.create_user(db, user)


@router.patch("/{user_id}", response_model=schemas.User)
def update_user(
    user_id: uuid.UUID,
    user_update: schemas.UserUpdate,
    db: Session = Depends(get_db),
):
    updated = user_repo.update_user(db, user_id, user_update)
    if updated is None:
        raise not_found("User")
    return updated


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(user_id: uuid.UUID, db: Session = Depends(get_db)):
    user_repo.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
