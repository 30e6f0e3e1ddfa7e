"""Store for discount coupons."""

from admin_console.application.interfaces import CouponClient
from admin_console.application.schemas import Coupon
from admin_console.application.services.resource_store import ResourceStore
from admin_console.application.services.state_broadcaster import StateBroadcaster
from admin_console.domain.entities import CouponApplication, MutationResult


class CouponStore(ResourceStore[Coupon]):
    """Coupon cache — adds activation toggles and discount calculation."""

    def __init__(
        self,
        client: CouponClient,
        *,
        broadcaster: StateBroadcaster | None = None,
    ):
        super().__init__(client, broadcaster=broadcaster)
        self._coupons = client

    async def activate(self, record_id: str) -> MutationResult[Coupon]:
        return await self._run(
            "activate",
            lambda: self._coupons.activate(record_id),
            lambda result: self._replace(record_id, result.record),
        )

    async def deactivate(self, record_id: str) -> MutationResult[Coupon]:
        return await self._run(
            "deactivate",
            lambda: self._coupons.deactivate(record_id),
            lambda result: self._replace(record_id, result.record),
        )

    async def apply_coupon(self, code: str, order_total: float) -> CouponApplication:
        return await self._run("apply", lambda: self._coupons.apply_coupon(code, order_total))
