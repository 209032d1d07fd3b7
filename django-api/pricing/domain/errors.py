"""Domain error codes for the pricing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PROPERTY_ID = "INVALID_PROPERTY_ID"
    PROPERTY_NOT_FOUND = "PROPERTY_NOT_FOUND"
    INVALID_DURATION = "INVALID_DURATION"
    DURATION_LIMIT_EXCEEDED = "DURATION_LIMIT_EXCEEDED"
    INVALID_DISCOUNT_CODE = "INVALID_DISCOUNT_CODE"
    INVALID_TIME_WINDOW = "INVALID_TIME_WINDOW"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPropertyIdError(DomainError):
    """Raised when a property ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PROPERTY_ID,
            message="Invalid property ID format",
        )


class PropertyNotFoundError(DomainError):
    """Raised when a property is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROPERTY_NOT_FOUND,
            message="Property not found",
        )


class InvalidDurationError(DomainError):
    """Raised when a requested duration is negative."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DURATION,
            message="Duration cannot be negative",
        )


class DurationLimitExceededError(DomainError):
    """Raised when an extension would push a session past the property limit."""

    def __init__(self, max_hours: int) -> None:
        super().__init__(
            code=ErrorCode.DURATION_LIMIT_EXCEEDED,
            message=f"Total duration would exceed limit of {max_hours} hours",
        )


class InvalidDiscountCodeError(DomainError):
    """Raised when a discount code is too short after normalization."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DISCOUNT_CODE,
            message="Code must be at least 3 characters",
        )


class InvalidTimeWindowError(DomainError):
    """Raised when a rule's time window cannot be saved."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_WINDOW,
            message=reason,
        )
