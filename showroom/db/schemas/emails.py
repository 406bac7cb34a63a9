import uuid
from datetime import datetime
from typing import ClassVar, FrozenSet, List
from pydantic import Field
from showroom.utils.domains import EmailStatus, Priority
from .base import SchemaBase, PatchSchema


class EmailCaseBase(SchemaBase):
    client_id: uuid.UUID | None = None
    subject: str = Field(min_length=1)
    content: str
    sender_email: str = Field(min_length=1)
    sender_name: str | None = None
    attachments: List[str] | None = None
    status: EmailStatus = EmailStatus.new
    priority: Priority = Priority.medium
    ai_reason: str | None = None
    needs_human: bool | None = True
    assigned_to: uuid.UUID | None = None
    vehicle_id: uuid.UUID | None = None
    internal_notes: str | None = None
    draft_response: str | None = None


class EmailCaseCreate(EmailCaseBase):
    pass


class EmailCaseUpdate(PatchSchema):
    # replied_at is server-managed and not writable
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"subject", "content", "sender_email", "status", "priority"}
    )

    client_id: uuid.UUID | None = None
    subject: str | None = Field(default=None, min_length=1)
    content: str | None = None
    sender_email: str | None = Field(default=None, min_length=1)
    sender_name: str | None = None
    attachments: List[str] | None = None
    status: EmailStatus | None = None
    priority: Priority | None = None
    ai_reason: str | None = None
    needs_human: bool | None = None
    assigned_to: uuid.UUID | None = None
    vehicle_id: uuid.UUID | None = None
    internal_notes: str | None = None
    draft_response: str | None = None


class EmailCase(EmailCaseBase):
    id: uuid.UUID
    received_at: datetime | None = None
    replied_at: datetime | None = None
