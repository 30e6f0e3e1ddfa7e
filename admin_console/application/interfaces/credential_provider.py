"""Abstract credential provider — port for bearer token lookup."""

from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    """Port — supplies the bearer token attached to outgoing requests."""

    @abstractmethod
    def get_token(self) -> str | None:
        """Return the current token, or ``None`` for an anonymous request.

        Called once per request and never cached by the caller, so a
        rotated or removed token takes effect on the next call.
        """
        ...
