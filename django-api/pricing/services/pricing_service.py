"""Pricing service - the caller-facing entry point of the engine.

Services:
- Depend only on interfaces (stores)
- Validate request input and map it to domain errors
- Fetch one rule snapshot (and at most one discount) per request
- Return domain models or domain errors
"""

import logging
import math
from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal

from django.utils import timezone as django_timezone

from pricing.conf import get_setting
from pricing.domain import PriceResult, PropertyId, normalize_code
from pricing.domain.amounts import to_decimal
from pricing.domain.discounts import apply_discount
from pricing.domain.errors import (
    DurationLimitExceededError,
    InvalidDurationError,
    InvalidPropertyIdError,
    PropertyNotFoundError,
)
from pricing.domain.fees import WAIVED, ChargeBreakdown, build_charge
from pricing.domain.resolver import resolve
from pricing.stores.interfaces import DiscountStore, RuleStore

logger = logging.getLogger(__name__)

Hours = int | float | Decimal


class PricingService:
    """Service for price quotes on new sessions and extensions."""

    def __init__(
        self,
        rule_store: RuleStore,
        discount_store: DiscountStore,
        clock: Callable[[], datetime] = django_timezone.now,
    ) -> None:
        self._rule_store = rule_store
        self._discount_store = discount_store
        self._clock = clock

    def quote(
        self,
        property_id: str,
        start: datetime,
        duration_hours: Hours,
        discount_code: str | None = None,
    ) -> PriceResult:
        """Return the authoritative charge for a session.

        Raises:
            InvalidPropertyIdError: If the property_id is not a valid UUID.
            InvalidDurationError: If duration_hours is negative or not finite.
            PropertyNotFoundError: If the property does not exist.
        """
        pid = self._parse_property_id(property_id)
        self._check_duration(duration_hours)
        self._ensure_property(pid)
        return self._price(pid, start, duration_hours, discount_code)

    def _price(
        self,
        pid: PropertyId,
        start: datetime,
        duration_hours: Hours,
        discount_code: str | None,
    ) -> PriceResult:
        rules, tz_name = self._rule_store.get_active_rules(pid)
        tz_name = tz_name or get_setting("DEFAULT_TIMEZONE")
        resolution = resolve(
            rules,
            start,
            duration_hours,
            tz_name,
            fallback_hourly_cents=get_setting("FALLBACK_HOURLY_CENTS"),
        )

        result = PriceResult(amount_cents=resolution.amount_cents, rule_applied=resolution.rule_applied)
        code = normalize_code(discount_code) if discount_code else ""
        if code:
            discount = self._discount_store.find_active(pid, code)
            outcome = apply_discount(discount, resolution.amount_cents, self._clock())
            if outcome.discount_applied is None:
                logger.info("Discount code %s not applicable for property %s", code, pid.value)
            result = PriceResult(
                amount_cents=outcome.final_amount_cents,
                rule_applied=resolution.rule_applied,
                discount_applied=outcome.discount_applied,
                discount_amount_cents=outcome.discount_amount_cents,
            )

        logger.info(
            "Quoted %d cents for property %s (%s hours, rule=%s, discount=%d)",
            result.amount_cents,
            pid.value,
            duration_hours,
            result.rule_applied.id.value if result.rule_applied else "fallback",
            result.discount_amount_cents,
        )
        return result

    def quote_extension(
        self,
        property_id: str,
        session_start: datetime,
        current_end: datetime,
        extension_hours: Hours,
        max_duration_hours: int | None = None,
    ) -> PriceResult:
        """Price an extension starting at the session's current end.

        Extensions never take a discount code.

        Raises:
            InvalidPropertyIdError: If the property_id is not a valid UUID.
            InvalidDurationError: If extension_hours is negative or not finite.
            PropertyNotFoundError: If the property does not exist.
            DurationLimitExceededError: If the extended session would be too long.
        """
        pid = self._parse_property_id(property_id)
        self._check_duration(extension_hours)
        self._ensure_property(pid)

        limit = max_duration_hours
        if limit is None:
            limit = self._rule_store.get_max_booking_hours(pid) or get_setting(
                "MAX_BOOKING_DURATION_HOURS"
            )

        new_end = current_end + timedelta(hours=float(extension_hours))
        total_hours = math.floor((new_end - session_start).total_seconds() / 3600)
        if total_hours > limit:
            logger.info(
                "Extension refused for property %s: %d hours exceeds limit of %d",
                pid.value,
                total_hours,
                limit,
            )
            raise DurationLimitExceededError(limit)

        return self._price(pid, current_end, extension_hours, None)

    def charge_breakdown(
        self,
        result: PriceResult,
        platform_fee_percent: Hours | None = None,
    ) -> ChargeBreakdown:
        """Split a quoted amount into parking, service fee and platform share.

        A paid amount whose total is below the processor minimum is waived:
        the breakdown is all zeros with waived=True and nothing is collected.
        """
        if platform_fee_percent is None:
            platform_fee_percent = get_setting("PLATFORM_FEE_PERCENT")
        charge = build_charge(
            result.amount_cents,
            platform_fee_percent,
            get_setting("SERVICE_FEE_CENTS"),
        )
        if charge.parking_cents and not charge.is_collectable(get_setting("MINIMUM_CHARGE_CENTS")):
            logger.warning(
                "Charge of %d cents is below the processor minimum; waiving it", charge.total_cents
            )
            return WAIVED
        return charge

    def _parse_property_id(self, property_id: str) -> PropertyId:
        try:
            return PropertyId.from_string(property_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidPropertyIdError() from None

    def _check_duration(self, duration_hours: Hours) -> None:
        value = to_decimal(duration_hours)
        if not value.is_finite() or value < 0:
            raise InvalidDurationError()

    def _ensure_property(self, pid: PropertyId) -> None:
        if not self._rule_store.property_exists(pid):
            raise PropertyNotFoundError()
