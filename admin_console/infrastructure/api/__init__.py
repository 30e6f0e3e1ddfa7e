"""Console REST API clients."""

from .resource_definition import (
    CONTACT_MESSAGES,
    COUPONS,
    FAQS,
    REVIEWS,
    ResourceDefinition,
)
from .rest_resource_client import RestResourceClient
from .rest_contact_client import RestContactMessageClient
from .rest_coupon_client import RestCouponClient
from .rest_review_client import RestReviewClient

__all__ = [
    "CONTACT_MESSAGES",
    "COUPONS",
    "FAQS",
    "REVIEWS",
    "ResourceDefinition",
    "RestResourceClient",
    "RestContactMessageClient",
    "RestCouponClient",
    "RestReviewClient",
]
