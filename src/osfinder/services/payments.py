"""Sponsor pricing and coupon codes.

Static tables only; capturing the payment is the payment processor's job and
the resulting capture id is what a sponsor submission carries.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from osfinder.core.exceptions import NotFoundError

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Price:
    amount: Decimal
    currency: str
    description: str


@dataclass(frozen=True)
class Coupon:
    discount: Decimal  # fraction off, 0.60 == 60%
    description: str


@dataclass(frozen=True)
class Quote:
    product: str
    currency: str
    valid: bool
    original_amount: Decimal
    discounted_amount: Decimal
    discount: Decimal
    description: str | None = None


PRICES: dict[str, Price] = {
    "sponsor_submission": Price(
        amount=Decimal("49.00"),
        currency="USD",
        description="Sponsor Plan - Featured listing for 7 days + Newsletter feature + Instant approval",
    ),
}

COUPON_CODES: dict[str, Coupon] = {
    "LAUNCH60": Coupon(
        discount=Decimal("0.60"),
        description="60% launch discount",
    ),
    "LISTEDDISCOUNT": Coupon(
        discount=Decimal("0.60"),
        description="60% discount for admin-listed projects",
    ),
}


def get_price(product: str) -> Price:
    price = PRICES.get(product)
    if price is None:
        raise NotFoundError(f"Product '{product}'")
    return price


def apply_coupon(product: str, code: str | None) -> Quote:
    """Price `product` with an optional coupon code.

    Codes are trimmed and upper-cased before lookup. Unknown codes yield
    valid=False at the original price.
    """
    price = get_price(product)
    coupon = COUPON_CODES.get((code or "").strip().upper())

    if coupon is None:
        return Quote(
            product=product,
            currency=price.currency,
            valid=False,
            original_amount=price.amount,
            discounted_amount=price.amount,
            discount=Decimal("0"),
        )

    discounted = (price.amount * (1 - coupon.discount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    return Quote(
        product=product,
        currency=price.currency,
        valid=True,
        original_amount=price.amount,
        discounted_amount=discounted,
        discount=coupon.discount,
        description=coupon.description,
    )
