"""Immutable snapshot of a resource store, handed to UI subscribers."""

from dataclasses import dataclass
from typing import Generic, TypeVar

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class StoreState(Generic[RecordT]):
    """State of one resource store at a point in time."""

    records: tuple[RecordT, ...] = ()
    total_count: int = 0
    total_pages: int = 1
    loading: bool = False
    error: str | None = None
