"""Serializers for request validation and domain model responses."""

from rest_framework import serializers

from pricing.domain.value_objects import ServiceType


class PricingConfigUpdateSerializer(serializers.Serializer):
    """Body of an admin pricing update: {"config": {...}}."""

    config = serializers.JSONField()


class QuoteRequestSerializer(serializers.Serializer):
    """Booking choices submitted for a quote."""

    photographer_id = serializers.CharField(required=False, allow_blank=True)
    service_type = serializers.ChoiceField(
        choices=[service.value for service in ServiceType],
        default=ServiceType.PHOTOSHOOT.value,
    )
    package_type = serializers.CharField(required=False, max_length=50)
    has_video_package = serializers.BooleanField(default=False)
    video_package_type = serializers.CharField(required=False, allow_null=True, max_length=50)
    people_count = serializers.IntegerField(required=False)
    event_hours = serializers.IntegerField(required=False)
    transportation_zone = serializers.CharField(required=False, allow_blank=True, max_length=100)
    transportation_fee = serializers.DecimalField(
        required=False, max_digits=10, decimal_places=2, coerce_to_string=False
    )
    addons = serializers.ListField(child=serializers.CharField(max_length=100), default=list)

    def validate_transportation_fee(self, value):
        """Fees are summed with config prices, which are plain JSON numbers."""
        return int(value) if value == value.to_integral_value() else float(value)


class LineItemSerializer(serializers.Serializer):
    code = serializers.CharField()
    label = serializers.CharField()
    amount = serializers.ReadOnlyField()


class QuoteSerializer(serializers.Serializer):
    """Serializer for BookingSnapshot domain model."""

    service_type = serializers.CharField(source="service_type.value")
    package_type = serializers.CharField()
    has_photo_package = serializers.BooleanField()
    has_video_package = serializers.BooleanField()
    video_package_type = serializers.CharField(allow_null=True)
    base_price = serializers.ReadOnlyField()
    video_price = serializers.ReadOnlyField()
    people_count = serializers.IntegerField()
    event_hours = serializers.IntegerField()
    transportation_fee = serializers.ReadOnlyField()
    addons = serializers.ListField(child=serializers.CharField())
    total_price = serializers.ReadOnlyField()
    deposit_amount = serializers.IntegerField()
    balance_due = serializers.ReadOnlyField()
    breakdown = LineItemSerializer(many=True)
