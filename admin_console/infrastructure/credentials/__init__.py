"""Credential infrastructure package."""

from .providers import KeyValueCredentialProvider, StaticCredentialProvider

__all__ = ["KeyValueCredentialProvider", "StaticCredentialProvider"]
