"""Result envelopes returned by resource clients — pure Python value objects."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class Page(Generic[RecordT]):
    """One page of records as ordered by the server.

    ``total_count`` counts records across all pages; ``total_pages`` is
    always at least 1, even for an empty result.
    """

    records: list[RecordT] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 1


@dataclass(frozen=True)
class MutationResult(Generic[RecordT]):
    """Outcome of a create/update/status/activation call.

    ``record`` is the server's copy of the affected record; it is ``None``
    only for endpoints that answer with a bare message.
    """

    record: RecordT | None
    message: str


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a delete call."""

    message: str


@dataclass(frozen=True)
class CouponApplication:
    """Discount computed by the server for a coupon code and an order total."""

    discount: float
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ExportResult:
    """Raw export payload plus what the UI needs to save it."""

    content: bytes
    content_type: str
    format: str
    filename: str
