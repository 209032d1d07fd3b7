"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. The pricing engine only
ever reads from them; redeem() exists for callers that record a discount use
after a price has been resolved.
"""

from abc import ABC, abstractmethod

from pricing.domain import Discount, DiscountId, PricingRule, PropertyId


class RuleStore(ABC):
    """Interface for pricing rule and property lookups."""

    @abstractmethod
    def get_active_rules(self, property_id: PropertyId) -> tuple[list[PricingRule], str | None]:
        """Return active rules ordered by priority descending, and the property timezone."""
        ...

    @abstractmethod
    def property_exists(self, property_id: PropertyId) -> bool:
        """Check if a property exists."""
        ...

    @abstractmethod
    def get_max_booking_hours(self, property_id: PropertyId) -> int | None:
        """Return the longest session the property allows, or None if unset."""
        ...


class DiscountStore(ABC):
    """Interface for discount lookups and redemption."""

    @abstractmethod
    def find_active(self, property_id: PropertyId, code: str) -> Discount | None:
        """Return the active discount with this normalized code, or None."""
        ...

    @abstractmethod
    def redeem(self, discount_id: DiscountId) -> bool:
        """Atomically count one use if still below the limit; False if not."""
        ...
