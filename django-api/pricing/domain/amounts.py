"""Currency-safe amount arithmetic.

Amounts are integer cents. Durations may be fractional hours, so they are
lifted into Decimal via str() and every rounding point is explicit.
"""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

from pricing.domain.models import PricingRule, RateType

HOURS_PER_DAY = Decimal(24)

_ONE = Decimal(1)


def to_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest whole cent, ties away from zero."""
    return int(value.quantize(_ONE, rounding=ROUND_HALF_UP))


def hourly_amount(rate_cents: int, duration_hours: int | float | Decimal) -> int:
    return round_half_up(Decimal(rate_cents) * to_decimal(duration_hours))


def days_charged(duration_hours: int | float | Decimal) -> int:
    """Whole days consumed; any partial day counts as a full one."""
    days = to_decimal(duration_hours) / HOURS_PER_DAY
    return int(days.to_integral_value(rounding=ROUND_CEILING))


def amount_for_duration(rule: PricingRule, duration_hours: int | float | Decimal) -> int:
    if rule.rate_type is RateType.FLAT:
        return rule.amount_cents
    if rule.rate_type is RateType.HOURLY:
        return hourly_amount(rule.amount_cents, duration_hours)
    return rule.amount_cents * days_charged(duration_hours)
