from fastapi import APIRouter

from osfinder.schemas.payment import QuoteRequest, QuoteResponse
from osfinder.services.payments import apply_coupon

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/quote", response_model=QuoteResponse)
async def quote(data: QuoteRequest) -> QuoteResponse:
    """Price a product with an optional coupon. Never contacts the payment processor."""
    result = apply_coupon(data.product, data.coupon_code)

    message = None
    if data.coupon_code and not result.valid:
        message = "Invalid coupon code"

    return QuoteResponse(
        product=result.product,
        currency=result.currency,
        original_amount=result.original_amount,
        discounted_amount=result.discounted_amount,
        discount=result.discount,
        coupon_valid=result.valid,
        description=result.description,
        message=message,
    )
