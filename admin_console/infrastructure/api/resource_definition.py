"""Per-resource configuration for the generic REST client.

A resource is described by its path, its record model and the wording of
its fallback messages; everything else is shared.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from admin_console.application.schemas import FAQ, ContactMessage, Coupon, RecordBase, Review

RecordT = TypeVar("RecordT", bound=RecordBase)

_FAILURE_TEMPLATES: dict[str, str] = {
    "list": "Failed to fetch {plural}.",
    "get": "Failed to fetch {singular} details.",
    "create": "Failed to create {singular}.",
    "update": "Failed to update {singular}.",
    "delete": "Failed to delete {singular}.",
    "activate": "Failed to activate {singular}.",
    "deactivate": "Failed to deactivate {singular}.",
    "apply": "Failed to apply {singular}.",
    "set_status": "Failed to update {singular} status.",
    "export": "Failed to export {plural}.",
}

_SUCCESS_VERBS: dict[str, str] = {
    "create": "created",
    "update": "updated",
    "delete": "deleted",
    "activate": "activated",
    "deactivate": "deactivated",
    "apply": "applied",
    "set_status": "status updated",
}


@dataclass(frozen=True)
class ResourceDefinition(Generic[RecordT]):
    """Static description of one console API resource."""

    name: str
    path: str
    record_model: type[RecordT]
    singular: str
    plural: str
    failure_overrides: Mapping[str, str] = field(default_factory=dict)
    success_overrides: Mapping[str, str] = field(default_factory=dict)

    def failure_message(self, operation: str) -> str:
        """Fixed message for a failed ``operation`` when the server gives none."""
        if operation in self.failure_overrides:
            return self.failure_overrides[operation]
        template = _FAILURE_TEMPLATES.get(operation, "Failed to {operation} {singular}.")
        return template.format(singular=self.singular, plural=self.plural, operation=operation)

    def success_message(self, operation: str) -> str:
        """Message for a successful ``operation`` when the server gives none."""
        if operation in self.success_overrides:
            return self.success_overrides[operation]
        verb = _SUCCESS_VERBS.get(operation, "saved")
        title = self.singular[:1].upper() + self.singular[1:]
        return f"{title} {verb} successfully."


CONTACT_MESSAGES = ResourceDefinition(
    name="contact_messages",
    path="/contact",
    record_model=ContactMessage,
    singular="contact message",
    plural="contact messages",
    failure_overrides={
        "get": "Failed to fetch message details.",
        "set_status": "Failed to update message status.",
    },
    success_overrides={
        "set_status": "Message status updated successfully.",
    },
)

COUPONS = ResourceDefinition(
    name="coupons",
    path="/coupons",
    record_model=Coupon,
    singular="coupon",
    plural="coupons",
)

FAQS = ResourceDefinition(
    name="faqs",
    path="/faqs",
    record_model=FAQ,
    singular="FAQ",
    plural="FAQs",
)

REVIEWS = ResourceDefinition(
    name="reviews",
    path="/reviews",
    record_model=Review,
    singular="review",
    plural="reviews",
)
