"""Abstract resource client interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from admin_console.application.schemas import ContactMessage, Coupon
from admin_console.domain.entities import (
    CouponApplication,
    DeleteResult,
    ExportResult,
    MessageStatus,
    MutationResult,
    Page,
)

RecordT = TypeVar("RecordT")

# Request bodies may be a pydantic DTO or a plain mapping of wire fields.
Payload = BaseModel | Mapping[str, Any]
QueryParams = Mapping[str, Any]


class ResourceClient(ABC, Generic[RecordT]):
    """Port for CRUD access to one resource type of the console API.

    Every method raises ``RequestFailed`` on failure and never retries.
    """

    @property
    @abstractmethod
    def resource_name(self) -> str:
        """Plural resource name (e.g. 'coupons')."""
        ...

    @abstractmethod
    async def list_records(self, params: QueryParams | None = None) -> Page[RecordT]:
        """Fetch one page; filter, sort and page params are passed through verbatim."""
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> RecordT:
        """Fetch a single record."""
        ...

    @abstractmethod
    async def create(self, payload: Payload) -> MutationResult[RecordT]:
        """Create a record and return the server's copy."""
        ...

    @abstractmethod
    async def update(self, record_id: str, patch: Payload) -> MutationResult[RecordT]:
        """Update a record with a full or partial payload."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> DeleteResult:
        """Permanently delete a record."""
        ...


class ContactMessageClient(ResourceClient[ContactMessage]):
    """Port for support messages — adds status workflow and export."""

    @abstractmethod
    async def set_status(self, record_id: str, status: MessageStatus) -> MutationResult[ContactMessage]:
        """Move a message to another workflow status."""
        ...

    @abstractmethod
    async def export(self, export_format: str = "csv") -> ExportResult:
        """Download all messages as 'csv' or 'excel'."""
        ...


class CouponClient(ResourceClient[Coupon]):
    """Port for coupons — adds activation and order discount calculation."""

    @abstractmethod
    async def activate(self, record_id: str) -> MutationResult[Coupon]:
        ...

    @abstractmethod
    async def deactivate(self, record_id: str) -> MutationResult[Coupon]:
        ...

    @abstractmethod
    async def apply_coupon(self, code: str, order_total: float) -> CouponApplication:
        """Ask the server which discount a code grants on an order total."""
        ...
