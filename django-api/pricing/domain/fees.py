"""Checkout fee breakdown for a resolved parking amount."""

from dataclasses import dataclass
from decimal import Decimal

from pricing.domain.amounts import round_half_up, to_decimal


@dataclass(frozen=True)
class ChargeBreakdown:
    """What the customer pays and how much of it the platform keeps."""

    parking_cents: int
    service_fee_cents: int
    platform_share_cents: int
    waived: bool = False

    @property
    def total_cents(self) -> int:
        return self.parking_cents + self.service_fee_cents

    @property
    def application_fee_cents(self) -> int:
        return self.service_fee_cents + self.platform_share_cents

    def is_collectable(self, minimum_charge_cents: int) -> bool:
        """False when the total is below the processor minimum."""
        return self.total_cents >= minimum_charge_cents


WAIVED = ChargeBreakdown(parking_cents=0, service_fee_cents=0, platform_share_cents=0, waived=True)


def build_charge(
    amount_cents: int,
    platform_fee_percent: int | float | Decimal,
    service_fee_cents: int,
) -> ChargeBreakdown:
    # Free sessions carry no fees at all.
    if amount_cents <= 0:
        return ChargeBreakdown(parking_cents=0, service_fee_cents=0, platform_share_cents=0)
    share = round_half_up(Decimal(amount_cents) * to_decimal(platform_fee_percent) / 100)
    return ChargeBreakdown(
        parking_cents=amount_cents,
        service_fee_cents=service_fee_cents,
        platform_share_cents=share,
    )
