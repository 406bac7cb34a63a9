import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet
from pydantic import Field
from .base import SchemaBase, PatchSchema


class KnowledgeItemBase(SchemaBase):
    category: str = Field(min_length=1)
    key: str = Field(min_length=1)
    value: str
    updated_by: uuid.UUID | None = None


class KnowledgeItemCreate(KnowledgeItemBase):
    pass


class KnowledgeItemUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"category", "key", "value"})

    category: str | None = Field(default=None, min_length=1)
    key: str | None = Field(default=None, min_length=1)
    value: str | None = None
    updated_by: uuid.UUID | None = None


class KnowledgeItem(KnowledgeItemBase):
    id: uuid.UUID
    updated_at: datetime | None = None
