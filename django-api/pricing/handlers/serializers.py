"""Serializers for pricing records and price results.

Rule and discount serializers validate writes so stored data agrees with
what the engine reads; PriceResultSerializer renders a result for audit
trails.
"""

from rest_framework import serializers

from pricing.domain import DiscountCode, DiscountType, RateType, TimeWindow
from pricing.domain.errors import InvalidDiscountCodeError


class PricingRuleSerializer(serializers.Serializer):
    """Write-side validation for a pricing rule."""

    property_id = serializers.UUIDField()
    priority = serializers.IntegerField(default=0)
    name = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    days_of_week = serializers.ListField(
        child=serializers.IntegerField(min_value=0, max_value=6),
        required=False,
        allow_null=True,
    )
    start_time = serializers.TimeField(required=False, allow_null=True)
    end_time = serializers.TimeField(required=False, allow_null=True)
    rate_type = serializers.ChoiceField(choices=[rate.value for rate in RateType])
    amount_cents = serializers.IntegerField(min_value=0)
    is_active = serializers.BooleanField(default=True)

    def validate(self, attrs):
        start = attrs.get("start_time")
        end = attrs.get("end_time")
        if (start is None) != (end is None):
            raise serializers.ValidationError(
                {"end_time": "Start time and end time must be set together"}
            )
        if start is not None and start == end:
            raise serializers.ValidationError(
                {"end_time": "Start time and end time cannot be the same"}
            )
        return attrs


class DiscountSerializer(serializers.Serializer):
    """Write-side validation for a discount; stores the normalized code."""

    property_id = serializers.UUIDField()
    code = serializers.CharField(max_length=64)
    discount_type = serializers.ChoiceField(choices=[kind.value for kind in DiscountType])
    amount = serializers.IntegerField(min_value=0)
    usage_limit = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    expires_at = serializers.DateTimeField(required=False, allow_null=True)
    is_active = serializers.BooleanField(default=True)

    def validate_code(self, value: str) -> str:
        try:
            return str(DiscountCode.parse(value))
        except InvalidDiscountCodeError as exc:
            raise serializers.ValidationError(exc.message) from exc

    def validate(self, attrs):
        if attrs["discount_type"] == DiscountType.PERCENTAGE.value and attrs["amount"] > 100:
            raise serializers.ValidationError({"amount": "Percentage cannot exceed 100"})
        return attrs


class AppliedRuleSerializer(serializers.Serializer):
    """Serializer for the PricingRule domain model."""

    id = serializers.SerializerMethodField()
    name = serializers.CharField(allow_null=True)
    priority = serializers.IntegerField()
    rate_type = serializers.SerializerMethodField()
    amount_cents = serializers.IntegerField()
    overnight = serializers.SerializerMethodField()

    def get_id(self, obj) -> str:
        return str(obj.id.value)

    def get_rate_type(self, obj) -> str:
        return obj.rate_type.value

    def get_overnight(self, obj) -> bool:
        window: TimeWindow | None = obj.time_window
        return window is not None and window.is_overnight


class AppliedDiscountSerializer(serializers.Serializer):
    """Serializer for the Discount domain model."""

    id = serializers.SerializerMethodField()
    code = serializers.CharField()
    discount_type = serializers.SerializerMethodField()
    amount = serializers.IntegerField()

    def get_id(self, obj) -> str:
        return str(obj.id.value)

    def get_discount_type(self, obj) -> str:
        return obj.discount_type.value


class PriceResultSerializer(serializers.Serializer):
    """Serializer for the PriceResult domain model."""

    amount_cents = serializers.IntegerField()
    rule_applied = AppliedRuleSerializer(allow_null=True)
    discount_applied = AppliedDiscountSerializer(allow_null=True)
    discount_amount_cents = serializers.IntegerField()
    used_fallback = serializers.BooleanField()
