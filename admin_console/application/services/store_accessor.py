"""Scoped store lookup for UI code.

A scope is opened with ``provide_store`` and covers everything executed in
the current context, including asyncio tasks started inside it. Inside a
scope, ``use_store`` returns the nearest provided store of the requested
type; outside one it raises ``ScopeMisuse``.

Usage:
    with provide_store(coupon_store):
        ...
        store = use_coupons()
        await store.list_records({"page": 1, "limit": 10})
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import TypeVar

from admin_console.application.services.contact_store import ContactStore
from admin_console.application.services.coupon_store import CouponStore
from admin_console.application.services.faq_store import FAQStore
from admin_console.application.services.resource_store import ResourceStore
from admin_console.application.services.review_store import ReviewStore
from admin_console.domain.exceptions import ScopeMisuse

StoreT = TypeVar("StoreT", bound=ResourceStore)

_EMPTY_SCOPE: Mapping[type, ResourceStore] = MappingProxyType({})
_store_scope: ContextVar[Mapping[type, ResourceStore]] = ContextVar(
    "admin_console_store_scope", default=_EMPTY_SCOPE
)


@contextmanager
def provide_store(*stores: ResourceStore) -> Iterator[None]:
    """Make ``stores`` available to ``use_store`` for the duration of the block.

    Scopes nest: an inner scope shadows stores of the same type and the
    outer ones come back on exit.
    """
    scope = dict(_store_scope.get())
    for store in stores:
        scope[type(store)] = store
    token = _store_scope.set(MappingProxyType(scope))
    try:
        yield
    finally:
        _store_scope.reset(token)


def use_store(store_type: type[StoreT]) -> StoreT:
    """Return the nearest provided store of ``store_type``.

    An exact type match wins; otherwise the one provided store that is an
    instance of ``store_type`` is returned.

    Raises:
        ScopeMisuse: If no enclosing scope provides such a store, or if
            several provided stores match ``store_type``.
    """
    scope = _store_scope.get()
    store = scope.get(store_type)
    if store is not None:
        return store

    matches = [candidate for candidate in scope.values() if isinstance(candidate, store_type)]
    if not matches:
        raise ScopeMisuse(store_type.__name__)
    if len(matches) > 1:
        names = ", ".join(sorted(type(match).__name__ for match in matches))
        raise ScopeMisuse(
            store_type.__name__,
            f"{store_type.__name__} is ambiguous in this scope (provided: {names})",
        )
    return matches[0]


def use_contacts() -> ContactStore:
    return use_store(ContactStore)


def use_coupons() -> CouponStore:
    return use_store(CouponStore)


def use_faqs() -> FAQStore:
    return use_store(FAQStore)


def use_reviews() -> ReviewStore:
    return use_store(ReviewStore)
