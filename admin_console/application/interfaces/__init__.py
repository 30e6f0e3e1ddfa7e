from .credential_provider import CredentialProvider
from .resource_client import (
    ContactMessageClient,
    CouponClient,
    Payload,
    QueryParams,
    ResourceClient,
)

__all__ = [
    "CredentialProvider",
    "ContactMessageClient",
    "CouponClient",
    "Payload",
    "QueryParams",
    "ResourceClient",
]
