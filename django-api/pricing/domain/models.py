"""Domain models for pricing rules, discounts and price results.

These are pure domain objects: snapshots handed to the engine by the caller.
Django ORM models are in pricing/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum
from typing import Self

from pricing.domain.value_objects import DiscountId, PropertyId, RuleId, TimeWindow


class RateType(Enum):
    """How a rule's amount scales with duration."""

    FLAT = "FLAT"
    HOURLY = "HOURLY"
    DAILY = "DAILY"


class DiscountType(Enum):
    """How a discount's amount is interpreted."""

    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"


@dataclass(frozen=True)
class PricingRule:
    """Domain representation of a PricingRule.

    Days of week use 0=Sunday..6=Saturday; an empty tuple means every day.
    A rule with only one of start_time/end_time is kept as-is (it comes from
    storage) and never matches; see has_malformed_window.
    """

    id: RuleId
    property_id: PropertyId
    priority: int
    rate_type: RateType
    amount_cents: int
    name: str | None = None
    days_of_week: tuple[int, ...] = ()
    start_time: time | None = None
    end_time: time | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.amount_cents < 0:
            raise ValueError("Rule amount cannot be negative")
        if any(day < 0 or day > 6 for day in self.days_of_week):
            raise ValueError("Days of week must be between 0 (Sunday) and 6 (Saturday)")

    @property
    def time_window(self) -> TimeWindow | None:
        if self.start_time is None or self.end_time is None:
            return None
        return TimeWindow(start=self.start_time, end=self.end_time)

    @property
    def has_malformed_window(self) -> bool:
        return (self.start_time is None) != (self.end_time is None)


@dataclass(frozen=True)
class Discount:
    """Domain representation of a Discount."""

    id: DiscountId
    property_id: PropertyId
    code: str
    discount_type: DiscountType
    amount: int
    usage_limit: int | None = None
    usage_count: int = 0
    expires_at: datetime | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Discount amount cannot be negative")
        if self.discount_type is DiscountType.PERCENTAGE and self.amount > 100:
            raise ValueError("Percentage discount cannot exceed 100")

    def is_exhausted(self) -> bool:
        return self.usage_limit is not None and self.usage_count >= self.usage_limit

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at < now


@dataclass(frozen=True)
class Resolution:
    """Base amount chosen by the resolver and the rule that set it."""

    amount_cents: int
    rule_applied: PricingRule | None


@dataclass(frozen=True)
class PriceResult:
    """Authoritative charge for one pricing request.

    rule_applied is None when the fallback rate was used; that is a normal
    outcome, not an error.
    """

    amount_cents: int
    rule_applied: PricingRule | None = None
    discount_applied: Discount | None = None
    discount_amount_cents: int = 0

    @property
    def used_fallback(self) -> bool:
        return self.rule_applied is None


@dataclass(frozen=True)
class PricingSnapshot:
    """Audit record of the rule that set a session's base rate."""

    pricing_rule_id: RuleId
    applied_rate_cents: int
    applied_rate_type: RateType

    @classmethod
    def from_result(cls, result: PriceResult) -> Self | None:
        rule = result.rule_applied
        if rule is None:
            return None
        return cls(
            pricing_rule_id=rule.id,
            applied_rate_cents=rule.amount_cents,
            applied_rate_type=rule.rate_type,
        )
