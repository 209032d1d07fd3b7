"""Validates an optional discount and applies it to a resolved base amount.

An inactive, expired or exhausted discount is treated exactly like no
discount at all. The usage counter is only read here; redeeming a code is the
caller's job (see DiscountStore.redeem).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pricing.domain.amounts import round_half_up
from pricing.domain.models import Discount, DiscountType


@dataclass(frozen=True)
class DiscountOutcome:
    final_amount_cents: int
    discount_applied: Discount | None = None
    discount_amount_cents: int = 0


def is_redeemable(discount: Discount | None, now: datetime) -> bool:
    if discount is None or not discount.is_active:
        return False
    if discount.is_expired(now):
        return False
    return not discount.is_exhausted()


def discount_amount(discount: Discount, base_amount_cents: int) -> int:
    if discount.discount_type is DiscountType.PERCENTAGE:
        return round_half_up(Decimal(base_amount_cents) * Decimal(discount.amount) / 100)
    return discount.amount


def apply_discount(
    discount: Discount | None,
    base_amount_cents: int,
    now: datetime,
) -> DiscountOutcome:
    if not is_redeemable(discount, now):
        return DiscountOutcome(final_amount_cents=base_amount_cents)

    amount = discount_amount(discount, base_amount_cents)
    return DiscountOutcome(
        final_amount_cents=max(0, base_amount_cents - amount),
        discount_applied=discount,
        discount_amount_cents=amount,
    )
