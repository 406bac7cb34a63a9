import uuid
from typing import ClassVar, FrozenSet
from pydantic import Field
from showroom.utils.domains import UserRole
from .base import SchemaBase, PatchSchema


class UserBase(SchemaBase):
    username: str = Field(min_length=1)
    display_name: str | None = None
    role: UserRole = UserRole.seller


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserUpdate(PatchSchema):
    # No password field: credentials cannot be changed through a partial update
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"username", "role"})

    username: str | None = Field(default=None, min_length=1)
    display_name: str | None = None
    role: UserRole | None = None


class User(UserBase):
    id: uuid.UUID
