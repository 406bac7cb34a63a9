"""
Knowledge base API endpoints.

Key/value facts grouped by category, consumed by the external assistant.
"""
from typing import List, Optional
import uuid
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from showroom.db import schemas
from showroom.db.database import get_db
from showroom.db.repositories import knowledge as knowledge_repo
from showroom.api.errors import not_found

router = APIRouter(prefix="/knowledge", tags=["knowledge"])


@router.get("", response_model=List[schemas.KnowledgeItem])
def list_knowledge_items(category: Optional[str] = None, db: Session = Depends(get_db)):
    return knowledge_repo.get_knowledge_items(db, category=category)


@router.get("/{item_id}", response_model=schemas.KnowledgeItem)
def get_knowledge_item(item_id: uuid.UUID, db: Session = Depends(get_db)):
    db_item = knowledge_repo.get_knowledge_item(db, item_id)
    if db_item is None:
        raise not_found("Knowledge item")
    return db_item


@router.post("", response_model=schemas.KnowledgeItem, status_code=status.HTTP_201_CREATED)
def create_knowledge_item(item: schemas.KnowledgeItemCreate, db: Session = Depends(get_db)):
    return knowledge_repo.create_knowledge_item(db, item)


@router.patch("/{item_id}", response_model=schemas.KnowledgeItem)
def update_knowledge_item(
    item_id: uuid.UUID,
    item_update: schemas.KnowledgeItemUpdate,
    db: Session = Depends(get_db),
):
    updated = knowledge_repo.update_knowledge_item(db, item_id, item_update)
    if updated is None:
        raise not_found("Knowledge item")
    return updated


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_knowledge_item(item_id: uuid.UUID, db: Session = Depends(get_db)):
    knowledge_repo.delete_knowledge_item(db, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
