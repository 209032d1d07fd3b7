"""Unit tests for the checkout fee breakdown.

Run with: pytest tests/test_fees.py -v
"""

from pricing.domain.fees import ChargeBreakdown, build_charge


class TestBuildCharge:
    """Tests for build_charge."""

    def test_paid_session(self):
        """Service fee is added and the platform keeps its share."""
        charge = build_charge(1500, 10, 100)
        assert charge == ChargeBreakdown(parking_cents=1500, service_fee_cents=100, platform_share_cents=150)
        assert charge.total_cents == 1600
        assert charge.application_fee_cents == 250

    def test_free_session_has_no_fees(self):
        """A zero amount carries no service fee."""
        charge = build_charge(0, 10, 100)
        assert charge.total_cents == 0
        assert charge.application_fee_cents == 0

    def test_platform_share_rounds_half_up(self):
        """12.5% of 1004 is 125.5, rounded to 126."""
        assert build_charge(1004, 12.5, 100).platform_share_cents == 126

    def test_is_collectable(self):
        """Totals under the processor minimum are not collectable."""
        assert build_charge(1, 10, 0).is_collectable(50) is False
        assert build_charge(50, 10, 0).is_collectable(50) is True
