"""Domain-specific exceptions — framework-independent."""


class RequestFailed(Exception):
    """Raised when a call to the console API fails for any reason.

    Covers HTTP error statuses, network errors and malformed responses alike.
    The message is the server-supplied ``message`` when the error envelope
    carried one, otherwise the fixed fallback of the operation that failed.
    A record the server reports as missing also surfaces as this error.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ScopeMisuse(RuntimeError):
    """Raised when a store accessor is used outside a scope providing that store."""

    def __init__(self, store_type: str, detail: str | None = None):
        self.store_type = store_type
        super().__init__(detail or f"{store_type} must be used within a scope that provides it")
