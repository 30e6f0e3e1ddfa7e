"""Credential provider adapters."""

from collections.abc import Mapping

from admin_console.application.interfaces import CredentialProvider


class KeyValueCredentialProvider(CredentialProvider):
    """Reads the token from a shared key-value store on every call.

    The store is owned by the auth collaborator (login writes, logout
    removes); this adapter only reads it.
    """

    def __init__(self, storage: Mapping[str, str], key: str = "adminToken"):
        self._storage = storage
        self._key = key

    def get_token(self) -> str | None:
        return self._storage.get(self._key) or None


class StaticCredentialProvider(CredentialProvider):
    """A fixed token, or anonymous access when ``token`` is None."""

    def __init__(self, token: str | None = None):
        self._token = token

    def get_token(self) -> str | None:
        return self._token
