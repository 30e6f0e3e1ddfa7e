"""Workflow states of a support (contact) message."""

from enum import Enum


class MessageStatus(str, Enum):
    """Lifecycle states of a contact message in the support inbox."""

    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
