"""
Client repository functions.

Clients are never deleted through this layer; email cases and waitlist
requests keep a weak `client_id` reference to them.
"""
from __future__ import annotations

import uuid
from sqlalchemy.orm import Session

from showroom.db import models, schemas
from .common import commit_and_refresh


def create_client(db: Session, client: schemas.ClientCreate):
    db_client = models.Client(**client.model_dump())
    db.add(db_client)
    return commit_and_refresh(db, db_client, entity="Client")


def get_client(db: Session, client_id: uuid.UUID):
    return db.query(models.Client).filter(models.Client.id == client_id).first()


def get_clients(db: Session):
    return db.query(models.Client).order_by(models.Client.created_at.desc()).all()


def update_client(db: Session, client_id: uuid.UUID, client: schemas.ClientUpdate):
    db_client = get_client(db, client_id)
    if db_client is None:
        return None
    for key, value in client.changes().items():
        setattr(db_client, key, value)
    return commit_and_refresh(db, db_client, entity="Client")
