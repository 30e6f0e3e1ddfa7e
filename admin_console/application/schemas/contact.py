"""Pydantic DTOs for support (contact) messages."""

from pydantic import BaseModel

from admin_console.application.schemas.record import CAMEL_CASE_CONFIG, RecordBase
from admin_console.domain.entities import MessageStatus


class ContactMessage(RecordBase):
    """A message submitted through the storefront contact form."""

    name: str = ""
    email: str = ""
    subject: str | None = None
    message: str = ""
    status: MessageStatus = MessageStatus.NEW


class ContactMessageUpdate(BaseModel):
    """Schema for editing a contact message — all fields optional."""

    subject: str | None = None
    message: str | None = None
    status: MessageStatus | None = None

    model_config = CAMEL_CASE_CONFIG
