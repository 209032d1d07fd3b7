"""Django ORM implementation of the pricing stores.

Rows that cannot become domain models are logged at WARNING and skipped.
"""

import logging

from django.db.models import F, Q

from pricing import models
from pricing.domain import (
    Discount,
    DiscountId,
    DiscountType,
    PricingRule,
    PropertyId,
    RateType,
    RuleId,
)
from pricing.stores.interfaces import DiscountStore, RuleStore

logger = logging.getLogger(__name__)


def rule_to_domain(row: models.PricingRule) -> PricingRule:
    return PricingRule(
        id=RuleId(row.id),
        property_id=PropertyId(row.property_id),
        priority=row.priority,
        rate_type=RateType(row.rate_type),
        amount_cents=row.amount_cents,
        name=row.name,
        days_of_week=tuple(row.days_of_week or ()),
        start_time=row.start_time,
        end_time=row.end_time,
        is_active=row.is_active,
    )


def discount_to_domain(row: models.Discount) -> Discount:
    return Discount(
        id=DiscountId(row.id),
        property_id=PropertyId(row.property_id),
        code=row.code,
        discount_type=DiscountType(row.discount_type),
        amount=row.amount,
        usage_limit=row.usage_limit,
        usage_count=row.usage_count,
        expires_at=row.expires_at,
        is_active=row.is_active,
    )


class DjangoRuleStore(RuleStore):
    """Database-backed rule store using Django ORM."""

    def get_active_rules(self, property_id: PropertyId) -> tuple[list[PricingRule], str | None]:
        timezone = (
            models.Property.objects.filter(id=property_id.value)
            .values_list("timezone", flat=True)
            .first()
        )
        rows = models.PricingRule.objects.filter(
            property_id=property_id.value, is_active=True
        ).order_by("-priority", "created_at")
        rules = []
        for row in rows:
            try:
                rules.append(rule_to_domain(row))
            except (ValueError, TypeError):
                logger.warning("Pricing rule %s has invalid configuration; skipping", row.id)
        return rules, timezone

    def property_exists(self, property_id: PropertyId) -> bool:
        return models.Property.objects.filter(id=property_id.value).exists()

    def get_max_booking_hours(self, property_id: PropertyId) -> int | None:
        return (
            models.Property.objects.filter(id=property_id.value)
            .values_list("max_booking_duration_hours", flat=True)
            .first()
        )


class DjangoDiscountStore(DiscountStore):
    """Database-backed discount store using Django ORM."""

    def find_active(self, property_id: PropertyId, code: str) -> Discount | None:
        row = models.Discount.objects.filter(
            property_id=property_id.value, code=code, is_active=True
        ).first()
        if row is None:
            return None
        try:
            return discount_to_domain(row)
        except (ValueError, TypeError):
            logger.warning("Discount %s has invalid configuration; ignoring", row.id)
            return None

    def redeem(self, discount_id: DiscountId) -> bool:
        # One conditional UPDATE; usage_count never passes usage_limit.
        updated = (
            models.Discount.objects.filter(id=discount_id.value)
            .filter(Q(usage_limit__isnull=True) | Q(usage_count__lt=F("usage_limit")))
            .update(usage_count=F("usage_count") + 1)
        )
        return updated == 1
