"""Decides whether a pricing rule governs a given instant.

Rules are written in the property's local wall-clock time, so the instant is
converted through the IANA zone database before the day and time checks.
"""

import logging
from datetime import datetime, timezone as dt_timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pricing.domain.models import PricingRule

logger = logging.getLogger(__name__)

UTC = dt_timezone.utc


def resolve_timezone(name: str | None) -> tzinfo:
    """Return the zone for an IANA name, or UTC when it cannot be resolved."""
    if not name:
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.debug("Unknown timezone %r, using UTC", name)
        return UTC


def to_local(instant: datetime, timezone: str | None) -> datetime:
    """Convert an instant to local wall-clock time. Naive instants are UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(resolve_timezone(timezone))


def day_of_week(local: datetime) -> int:
    """0=Sunday..6=Saturday."""
    return local.isoweekday() % 7


def is_applicable(rule: PricingRule, instant: datetime, timezone: str | None) -> bool:
    local = to_local(instant, timezone)

    if rule.days_of_week and day_of_week(local) not in rule.days_of_week:
        return False

    if rule.has_malformed_window:
        # Fail closed: a half-configured window never matches.
        logger.warning(
            "Pricing rule %s has a start or end time without its pair; skipping",
            rule.id.value,
        )
        return False

    window = rule.time_window
    if window is not None and not window.contains(local.time()):
        return False

    return True
