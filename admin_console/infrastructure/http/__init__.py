"""HTTP infrastructure package."""

from .transport import RawResult, Transport, extract_error_message

__all__ = ["RawResult", "Transport", "extract_error_message"]
