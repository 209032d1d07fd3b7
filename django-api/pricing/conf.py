"""App settings, read from the PRICING dict in Django settings."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "FALLBACK_HOURLY_CENTS": 500,
    "DEFAULT_TIMEZONE": "UTC",
    "SERVICE_FEE_CENTS": 100,
    "PLATFORM_FEE_PERCENT": 10,
    "MINIMUM_CHARGE_CENTS": 50,
    "MAX_BOOKING_DURATION_HOURS": 24,
}


def get_setting(name: str) -> Any:
    overrides = getattr(settings, "PRICING", {})
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
