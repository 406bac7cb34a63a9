import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet
from pydantic import Field
from .base import SchemaBase, PatchSchema


class ClientBase(SchemaBase):
    name: str = Field(min_length=1)
    email: str | None = None
    phone: str | None = None
    sms_consent: bool | None = False
    notes: str | None = None


class ClientCreate(ClientBase):
    pass


class ClientUpdate(PatchSchema):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    phone: str | None = None
    sms_consent: bool | None = None
    notes: str | None = None


class Client(ClientBase):
    id: uuid.UUID
    created_at: datetime | None = None
