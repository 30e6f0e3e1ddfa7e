from .message_status import MessageStatus
from .pagination import Paginator
from .results import (
    CouponApplication,
    DeleteResult,
    ExportResult,
    MutationResult,
    Page,
)
from .store_state import StoreState

__all__ = [
    "MessageStatus",
    "Paginator",
    "CouponApplication",
    "DeleteResult",
    "ExportResult",
    "MutationResult",
    "Page",
    "StoreState",
]
