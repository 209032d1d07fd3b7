from pricing.domain.models import (
    Discount,
    DiscountType,
    PriceResult,
    PricingRule,
    PricingSnapshot,
    RateType,
    Resolution,
)
from pricing.domain.value_objects import (
    DiscountCode,
    DiscountId,
    PropertyId,
    RuleId,
    TimeWindow,
    normalize_code,
)

__all__ = [
    "Discount",
    "DiscountType",
    "PriceResult",
    "PricingRule",
    "PricingSnapshot",
    "RateType",
    "Resolution",
    "DiscountCode",
    "DiscountId",
    "PropertyId",
    "RuleId",
    "TimeWindow",
    "normalize_code",
]
