"""Unit tests for domain primitives and models.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, time, timezone
from uuid import UUID

import pytest

from factories import make_discount, make_rule
from pricing.domain import (
    DiscountCode,
    DiscountType,
    PriceResult,
    PricingSnapshot,
    PropertyId,
    RateType,
    TimeWindow,
    normalize_code,
)
from pricing.domain.errors import ErrorCode, InvalidDiscountCodeError


class TestPropertyId:
    """Tests for PropertyId value object."""

    def test_from_string_valid_uuid(self):
        """PropertyId.from_string parses valid UUID."""
        raw = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
        assert PropertyId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """PropertyId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            PropertyId.from_string("prop-123")


class TestNormalizeCode:
    """Tests for discount code normalization."""

    def test_uppercases_and_strips_symbols(self):
        """Lowercase letters are uppercased and punctuation dropped."""
        assert normalize_code("summer-20!") == "SUMMER20"

    def test_strips_whitespace_and_non_ascii(self):
        """Whitespace and letters outside A-Z are removed."""
        assert normalize_code(" café 10 ") == "CAF10"

    def test_empty_input(self):
        """An empty code normalizes to an empty string."""
        assert normalize_code("") == ""


class TestDiscountCode:
    """Tests for DiscountCode value object."""

    def test_parse_normalizes(self):
        """parse() stores the canonical form."""
        assert str(DiscountCode.parse("vip-2026")) == "VIP2026"

    def test_parse_accepts_three_characters(self):
        """Exactly three characters is the minimum."""
        assert DiscountCode.parse("a-b-c").value == "ABC"

    def test_parse_rejects_short_code(self):
        """Codes shorter than 3 characters after normalization are rejected."""
        with pytest.raises(InvalidDiscountCodeError) as excinfo:
            DiscountCode.parse("a!b")
        assert excinfo.value.code is ErrorCode.INVALID_DISCOUNT_CODE

    def test_rejects_non_canonical_value(self):
        """Direct construction requires the canonical form."""
        with pytest.raises(InvalidDiscountCodeError):
            DiscountCode("summer")


class TestTimeWindow:
    """Tests for TimeWindow value object."""

    def test_same_day_window_bounds_are_inclusive(self):
        """Start and end instants both fall inside the window."""
        window = TimeWindow(start=time(9), end=time(11))
        assert window.contains(time(9))
        assert window.contains(time(11))
        assert not window.contains(time(11, 0, 1))
        assert not window.contains(time(8, 59, 59))

    def test_overnight_window_wraps_midnight(self):
        """An end before the start covers late evening and early morning."""
        window = TimeWindow(start=time(22), end=time(6))
        assert window.is_overnight
        assert window.contains(time(23))
        assert window.contains(time(0))
        assert window.contains(time(5, 59))
        assert not window.contains(time(12))

    def test_equal_bounds_is_not_overnight(self):
        """A zero-length window only matches its single instant."""
        window = TimeWindow(start=time(10), end=time(10))
        assert not window.is_overnight
        assert window.contains(time(10))
        assert not window.contains(time(10, 0, 1))


class TestPricingRule:
    """Tests for PricingRule domain model."""

    def test_rejects_negative_amount(self):
        """PricingRule raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            make_rule(amount_cents=-1)

    def test_rejects_day_out_of_range(self):
        """Days must be 0 (Sunday) through 6 (Saturday)."""
        with pytest.raises(ValueError):
            make_rule(days_of_week=(7,))

    def test_half_window_is_kept_but_flagged(self):
        """A start time without an end time is malformed, not an error."""
        rule = make_rule(start_time=time(8))
        assert rule.has_malformed_window
        assert rule.time_window is None

    def test_full_window(self):
        """Both bounds produce a TimeWindow."""
        rule = make_rule(start_time=time(22), end_time=time(6))
        assert not rule.has_malformed_window
        assert rule.time_window == TimeWindow(start=time(22), end=time(6))


class TestDiscount:
    """Tests for Discount domain model."""

    def test_rejects_percentage_over_100(self):
        """Percentage discounts are capped at 100."""
        with pytest.raises(ValueError):
            make_discount(amount=101)

    def test_fixed_amount_may_exceed_100(self):
        """Fixed amounts are cents and have no upper bound."""
        discount = make_discount(discount_type=DiscountType.FIXED_AMOUNT, amount=2500)
        assert discount.amount == 2500

    def test_rejects_negative_amount(self):
        """Discount raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            make_discount(amount=-5)

    def test_is_exhausted(self):
        """A discount at its usage limit is exhausted."""
        assert make_discount(usage_limit=3, usage_count=3).is_exhausted()
        assert not make_discount(usage_limit=3, usage_count=2).is_exhausted()
        assert not make_discount(usage_limit=None, usage_count=999).is_exhausted()

    def test_is_expired(self):
        """Expiry is strictly before now."""
        now = datetime(2026, 6, 1, tzinfo=timezone.utc)
        assert make_discount(expires_at=datetime(2026, 5, 31, tzinfo=timezone.utc)).is_expired(now)
        assert not make_discount(expires_at=now).is_expired(now)
        assert not make_discount(expires_at=None).is_expired(now)


class TestPricingSnapshot:
    """Tests for PricingSnapshot."""

    def test_from_result_records_rule(self):
        """The snapshot copies the rule's rate and type."""
        rule = make_rule(rate_type=RateType.HOURLY, amount_cents=250)
        snapshot = PricingSnapshot.from_result(PriceResult(amount_cents=750, rule_applied=rule))
        assert snapshot == PricingSnapshot(
            pricing_rule_id=rule.id,
            applied_rate_cents=250,
            applied_rate_type=RateType.HOURLY,
        )

    def test_fallback_has_no_snapshot(self):
        """Fallback results have no rule to snapshot."""
        result = PriceResult(amount_cents=1500)
        assert result.used_fallback
        assert PricingSnapshot.from_result(result) is None
