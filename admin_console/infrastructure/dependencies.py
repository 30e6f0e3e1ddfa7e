"""Dependency wiring — builds transports, clients and stores from settings."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass

import httpx

from admin_console.application.interfaces import CredentialProvider
from admin_console.application.services import (
    ContactStore,
    CouponStore,
    FAQStore,
    ReviewStore,
    provide_store,
)
from admin_console.config import Settings, get_settings
from admin_console.infrastructure.api import (
    CONTACT_MESSAGES,
    COUPONS,
    FAQS,
    REVIEWS,
    RestContactMessageClient,
    RestCouponClient,
    RestResourceClient,
    RestReviewClient,
)
from admin_console.infrastructure.credentials import KeyValueCredentialProvider
from admin_console.infrastructure.http import Transport


def get_credential_provider(
    storage: Mapping[str, str],
    settings: Settings | None = None,
) -> CredentialProvider:
    """Token lookup against the auth collaborator's key-value store."""
    settings = settings or get_settings()
    return KeyValueCredentialProvider(storage, key=settings.auth_token_key)


def build_transport(
    resource_path: str,
    credentials: CredentialProvider | None,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> Transport:
    """A transport bound to ``<api_url><resource_path>``."""
    settings = settings or get_settings()
    return Transport(
        base_url=f"{settings.api_url.rstrip('/')}{resource_path}",
        credentials=credentials,
        http_client=http_client,
        timeout=settings.request_timeout,
    )


def get_contact_store(
    credentials: CredentialProvider | None,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> ContactStore:
    transport = build_transport(CONTACT_MESSAGES.path, credentials, http_client, settings)
    return ContactStore(RestContactMessageClient(transport))


def get_coupon_store(
    credentials: CredentialProvider | None,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> CouponStore:
    transport = build_transport(COUPONS.path, credentials, http_client, settings)
    return CouponStore(RestCouponClient(transport))


def get_faq_store(
    credentials: CredentialProvider | None,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> FAQStore:
    transport = build_transport(FAQS.path, credentials, http_client, settings)
    return FAQStore(RestResourceClient(transport, FAQS))


def get_review_store(
    credentials: CredentialProvider | None,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> ReviewStore:
    transport = build_transport(REVIEWS.path, credentials, http_client, settings)
    return ReviewStore(RestReviewClient(transport))


@dataclass
class StoreRegistry:
    """The four resource stores of one console session."""

    contacts: ContactStore
    coupons: CouponStore
    faqs: FAQStore
    reviews: ReviewStore

    @contextmanager
    def provide(self) -> Iterator["StoreRegistry"]:
        """Open a scope in which every store is reachable via the accessors."""
        with provide_store(self.contacts, self.coupons, self.faqs, self.reviews):
            yield self

    def close(self) -> None:
        for store in (self.contacts, self.coupons, self.faqs, self.reviews):
            store.close()


def build_store_registry(
    credentials: CredentialProvider | None,
    http_client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> StoreRegistry:
    """Wire all four stores, sharing one credential provider and HTTP client."""
    return StoreRegistry(
        contacts=get_contact_store(credentials, http_client, settings),
        coupons=get_coupon_store(credentials, http_client, settings),
        faqs=get_faq_store(credentials, http_client, settings),
        reviews=get_review_store(credentials, http_client, settings),
    )
