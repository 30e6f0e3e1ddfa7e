"""Unit tests for the CouponStore — activation toggles and coupon application."""

import pytest

from admin_console.application.interfaces import CouponClient
from admin_console.application.schemas import Coupon
from admin_console.application.services import CouponStore
from admin_console.domain.entities import CouponApplication, DeleteResult, MutationResult, Page
from admin_console.domain.exceptions import RequestFailed


class FakeCouponClient(CouponClient):
    """In-memory fake coupon API."""

    resource_name = "coupons"

    def __init__(self, coupons: list[Coupon], total_count: int | None = None):
        self._coupons = {c.id: c for c in coupons}
        self._total_count = total_count
        self.fail_with: str | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise RequestFailed(self.fail_with)

    async def list_records(self, params=None) -> Page[Coupon]:
        self._check()
        coupons = list(self._coupons.values())
        total = self._total_count if self._total_count is not None else len(coupons)
        return Page(records=coupons, total_count=total, total_pages=4)

    async def get_by_id(self, record_id: str) -> Coupon:
        self._check()
        return self._coupons[record_id]

    async def create(self, payload) -> MutationResult[Coupon]:
        self._check()
        coupon = Coupon(id="new", **dict(payload))
        self._coupons[coupon.id] = coupon
        return MutationResult(record=coupon, message="Coupon created successfully.")

    async def update(self, record_id: str, patch) -> MutationResult[Coupon]:
        self._check()
        coupon = self._coupons[record_id].model_copy(update=dict(patch))
        self._coupons[record_id] = coupon
        return MutationResult(record=coupon, message="Coupon updated successfully.")

    async def delete(self, record_id: str) -> DeleteResult:
        self._check()
        del self._coupons[record_id]
        return DeleteResult(message="Coupon deleted successfully.")

    async def activate(self, record_id: str) -> MutationResult[Coupon]:
        return await self._toggle(record_id, True)

    async def deactivate(self, record_id: str) -> MutationResult[Coupon]:
        return await self._toggle(record_id, False)

    async def _toggle(self, record_id: str, active: bool) -> MutationResult[Coupon]:
        self._check()
        coupon = self._coupons[record_id].model_copy(update={"is_active": active})
        self._coupons[record_id] = coupon
        return MutationResult(record=coupon, message="ok")

    async def apply_coupon(self, code: str, order_total: float) -> CouponApplication:
        self._check()
        return CouponApplication(discount=order_total * 0.1, message="Coupon applied")


def _coupons(count: int) -> list[Coupon]:
    return [Coupon(id=f"c{i}", code=f"CODE{i}", discount=10) for i in range(1, count + 1)]


@pytest.mark.asyncio
async def test_list_second_page_scenario():
    """Ten coupons on page two of thirty-five."""
    store = CouponStore(FakeCouponClient(_coupons(10), total_count=35))

    await store.list_records({"page": 2, "limit": 10})

    assert len(store.records) == 10
    assert store.total_count == 35
    assert store.loading is False
    assert store.error is None


@pytest.mark.asyncio
async def test_deactivate_failure_scenario():
    client = FakeCouponClient(_coupons(3))
    store = CouponStore(client)
    await store.list_records()
    before = store.records
    client.fail_with = "Coupon already inactive"

    with pytest.raises(RequestFailed, match="Coupon already inactive"):
        await store.deactivate("c1")

    assert store.error == "Coupon already inactive"
    assert store.records == before
    assert store.loading is False


@pytest.mark.asyncio
async def test_activate_and_deactivate_replace_in_place():
    store = CouponStore(FakeCouponClient(_coupons(3)))
    await store.list_records()

    await store.deactivate("c2")
    assert [c.id for c in store.records] == ["c1", "c2", "c3"]
    assert store.records[1].is_active is False

    await store.activate("c2")
    assert store.records[1].is_active is True
    assert store.records[0].is_active is True
    assert store.total_count == 3


@pytest.mark.asyncio
async def test_apply_coupon_does_not_touch_cache():
    store = CouponStore(FakeCouponClient(_coupons(2)))
    await store.list_records()
    before = store.state

    application = await store.apply_coupon("CODE1", 200.0)

    assert application.discount == 20.0
    assert store.state == before


@pytest.mark.asyncio
async def test_apply_coupon_failure_sets_error():
    client = FakeCouponClient(_coupons(1))
    client.fail_with = "Coupon expired"
    store = CouponStore(client)

    with pytest.raises(RequestFailed):
        await store.apply_coupon("CODE1", 50)

    assert store.error == "Coupon expired"
    assert store.loading is False
