"""Pydantic DTOs for discount coupons."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from admin_console.application.schemas.record import CAMEL_CASE_CONFIG, RecordBase

DiscountType = Literal["percentage", "fixed"]


class Coupon(RecordBase):
    """A discount code as stored by the server."""

    code: str = ""
    discount: float | None = None
    discount_type: str | None = None
    expiration_date: datetime | None = None
    max_uses: int | None = None
    used_count: int = 0
    is_active: bool = True
    is_expired: bool = False


class CouponCreate(BaseModel):
    """Schema for creating a new coupon."""

    code: str = Field(..., min_length=1, max_length=64, examples=["SUMMER10"])
    discount: float = Field(..., gt=0, examples=[10])
    discount_type: DiscountType = "percentage"
    expiration_date: datetime
    max_uses: int | None = Field(None, ge=1)
    is_active: bool = True

    model_config = CAMEL_CASE_CONFIG


class CouponUpdate(BaseModel):
    """Schema for updating an existing coupon — all fields optional."""

    code: str | None = Field(None, min_length=1, max_length=64)
    discount: float | None = Field(None, gt=0)
    discount_type: DiscountType | None = None
    expiration_date: datetime | None = None
    max_uses: int | None = Field(None, ge=1)
    is_active: bool | None = None

    model_config = CAMEL_CASE_CONFIG
