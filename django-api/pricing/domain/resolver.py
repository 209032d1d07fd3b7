"""Rule selection: priority scan, fallback rate and the daily/hourly pass.

Selection is first-match-wins over rules sorted by descending priority. When
the winner is a DAILY rule, only the first applicable HOURLY rule among the
others is tried as a cheaper alternative; this is not a minimum over all
candidates.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from pricing.domain.amounts import amount_for_duration, hourly_amount
from pricing.domain.applicability import is_applicable
from pricing.domain.models import PricingRule, RateType, Resolution

logger = logging.getLogger(__name__)

FALLBACK_HOURLY_CENTS = 500


def by_priority(rules: Iterable[PricingRule]) -> list[PricingRule]:
    """Active rules, highest priority first; ties keep their given order."""
    return sorted(
        (rule for rule in rules if rule.is_active),
        key=lambda rule: rule.priority,
        reverse=True,
    )


def _first_hourly_alternative(
    ordered: list[PricingRule],
    matched_index: int,
    instant: datetime,
    timezone: str | None,
) -> PricingRule | None:
    for index, rule in enumerate(ordered):
        if index == matched_index or rule.rate_type is not RateType.HOURLY:
            continue
        if is_applicable(rule, instant, timezone):
            return rule
    return None


def resolve(
    rules: Iterable[PricingRule],
    instant: datetime,
    duration_hours: int | float | Decimal,
    timezone: str | None,
    *,
    fallback_hourly_cents: int = FALLBACK_HOURLY_CENTS,
) -> Resolution:
    ordered = by_priority(rules)

    matched_index = next(
        (i for i, rule in enumerate(ordered) if is_applicable(rule, instant, timezone)),
        None,
    )
    if matched_index is None:
        logger.info("No pricing rule matched; using fallback hourly rate")
        return Resolution(
            amount_cents=hourly_amount(fallback_hourly_cents, duration_hours),
            rule_applied=None,
        )

    matched = ordered[matched_index]
    amount = amount_for_duration(matched, duration_hours)

    if matched.rate_type is RateType.DAILY:
        alternative = _first_hourly_alternative(ordered, matched_index, instant, timezone)
        if alternative is not None:
            alternative_amount = amount_for_duration(alternative, duration_hours)
            if alternative_amount < amount:
                logger.debug(
                    "Hourly rule %s (%d) undercuts daily rule %s (%d)",
                    alternative.id.value,
                    alternative_amount,
                    matched.id.value,
                    amount,
                )
                return Resolution(amount_cents=alternative_amount, rule_applied=alternative)

    return Resolution(amount_cents=amount, rule_applied=matched)
