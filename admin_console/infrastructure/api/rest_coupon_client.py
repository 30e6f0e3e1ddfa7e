"""REST client for discount coupons."""

from admin_console.application.interfaces import CouponClient
from admin_console.application.schemas import Coupon
from admin_console.domain.entities import CouponApplication, MutationResult
from admin_console.domain.exceptions import RequestFailed
from admin_console.infrastructure.api.resource_definition import COUPONS, ResourceDefinition
from admin_console.infrastructure.api.rest_resource_client import RestResourceClient
from admin_console.infrastructure.http import Transport


class RestCouponClient(RestResourceClient[Coupon], CouponClient):
    """Coupons over REST, including activation toggles and order discounts."""

    def __init__(
        self,
        transport: Transport,
        definition: ResourceDefinition[Coupon] = COUPONS,
    ):
        super().__init__(transport, definition)

    async def activate(self, record_id: str) -> MutationResult[Coupon]:
        return await self._mutate("POST", f"/{record_id}/activate", "activate")

    async def deactivate(self, record_id: str) -> MutationResult[Coupon]:
        return await self._mutate("POST", f"/{record_id}/deactivate", "deactivate")

    async def apply_coupon(self, code: str, order_total: float) -> CouponApplication:
        fallback = self._definition.failure_message("apply")
        result = await self._transport.request(
            "POST",
            "/apply",
            json={"code": code, "orderTotal": order_total},
            fallback_message=fallback,
        )
        body = result.data if isinstance(result.data, dict) else {}
        details = body.get("data") if isinstance(body.get("data"), dict) else body

        try:
            discount = float(details.get("discount", 0))
        except (TypeError, ValueError) as exc:
            raise RequestFailed(fallback) from exc

        return CouponApplication(
            discount=discount,
            message=self._message(body, "apply"),
            details=dict(details),
        )
