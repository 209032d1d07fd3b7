"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import time
from typing import Self
from uuid import UUID

from pricing.domain.errors import InvalidDiscountCodeError

MIN_CODE_LENGTH = 3

_NON_CODE_CHARS = re.compile(r"[^A-Z0-9]")


@dataclass(frozen=True)
class PropertyId:
    """Unique identifier for a Property."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class RuleId:
    """Unique identifier for a PricingRule."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class DiscountId:
    """Unique identifier for a Discount."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


def normalize_code(raw: str) -> str:
    """Uppercase a discount code and drop everything outside [A-Z0-9]."""
    return _NON_CODE_CHARS.sub("", raw.upper())


@dataclass(frozen=True)
class DiscountCode:
    """Canonical discount code, as stored and looked up."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) < MIN_CODE_LENGTH or normalize_code(self.value) != self.value:
            raise InvalidDiscountCodeError()

    @classmethod
    def parse(cls, raw: str) -> Self:
        return cls(value=normalize_code(raw))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimeWindow:
    """Local time-of-day window; an end before the start wraps past midnight."""

    start: time
    end: time

    @property
    def is_overnight(self) -> bool:
        return self.end < self.start

    def contains(self, local_time: time) -> bool:
        """Bounds are inclusive on both ends."""
        if self.is_overnight:
            return local_time >= self.start or local_time <= self.end
        return self.start <= local_time <= self.end
