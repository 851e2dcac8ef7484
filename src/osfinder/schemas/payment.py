"""Sponsor price quote schemas."""

from decimal import Decimal

from pydantic import BaseModel


class QuoteRequest(BaseModel):
    product: str = "sponsor_submission"
    coupon_code: str | None = None


class QuoteResponse(BaseModel):
    product: str
    currency: str
    original_amount: Decimal
    discounted_amount: Decimal
    discount: Decimal
    coupon_valid: bool
    description: str | None = None
    message: str | None = None
