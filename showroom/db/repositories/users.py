"""
User repository functions.

Passwords are hashed on the way in; callers receive ORM rows and are
responsible for serializing them through a schema without the credential.
"""
from __future__ import annotations

import uuid
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from showroom.utils.security import hash_password
from .common import commit_and_refresh, delete_by_id


def create_user(db: Session, user: schemas.UserCreate):
    db_user = models.User(
        username=user.username,
        password=hash_password(user.password),
        display_name=user.display_name,
        role=user.role,
    )
    db.add(db_user)
    return commit_and_refresh(db, db_user, entity="User", unique_field="username")


def get_user(db: Session, user_id: uuid.UUID):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_username(db: Session, username: str):
    return db.query(models.User).filter(models.User.username == username).first()


def get_users(db: Session):
    return db.query(models.User).order_by(models.User.created_at.asc()).all()


def update_user(db: Session, user_id: uuid.UUID, user: schemas.UserUpdate):
    db_user = get_user(db, user_id)
    if db_user is None:
        return None
    # UserUpdate has no password field, so a supplied password never reaches here
    for key, value in user.changes().items():
        setattr(db_user, key, value)
    return commit_and_refresh(db, db_user, entity="User", unique_field="username")


def delete_user(db: Session, user_id: uuid.UUID) -> bool:
    return delete_by_id(db, models.User, user_id, entity="User")
