"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models

from pricing.domain.value_objects import normalize_code


class Property(models.Model):
    """Persistence model for a parking property."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    timezone = models.CharField(max_length=64, default="UTC")
    max_booking_duration_hours = models.PositiveIntegerField(default=24)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "properties"

    def __str__(self) -> str:
        return self.name


class PricingRule(models.Model):
    """Persistence model for pricing rules. Higher priority is evaluated first."""

    class RateType(models.TextChoices):
        FLAT = "FLAT"
        HOURLY = "HOURLY"
        DAILY = "DAILY"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    property = models.ForeignKey(
        Property, on_delete=models.CASCADE, related_name="pricing_rules"
    )
    priority = models.IntegerField(default=0)
    name = models.CharField(max_length=255, blank=True, null=True)
    days_of_week = models.JSONField(blank=True, null=True)
    start_time = models.TimeField(blank=True, null=True)
    end_time = models.TimeField(blank=True, null=True)
    rate_type = models.CharField(max_length=10, choices=RateType.choices)
    amount_cents = models.PositiveIntegerField()
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-priority"]
        indexes = [
            models.Index(fields=["property", "-priority"]),
        ]

    def __str__(self) -> str:
        return self.name or f"{self.rate_type} {self.amount_cents}"


class Discount(models.Model):
    """Persistence model for discount codes."""

    class DiscountType(models.TextChoices):
        PERCENTAGE = "PERCENTAGE"
        FIXED_AMOUNT = "FIXED_AMOUNT"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    property = models.ForeignKey(
        Property, on_delete=models.CASCADE, related_name="discounts"
    )
    code = models.CharField(max_length=64)
    discount_type = models.CharField(max_length=16, choices=DiscountType.choices)
    amount = models.PositiveIntegerField()
    usage_limit = models.PositiveIntegerField(blank=True, null=True)
    usage_count = models.PositiveIntegerField(default=0)
    expires_at = models.DateTimeField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["property", "code"], name="unique_discount_code_per_property"
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        self.code = normalize_code(self.code)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.code
