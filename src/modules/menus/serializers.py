"""Menu DRF serializers for API input."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers


class CreateMenuSerializer(serializers.Serializer):
    seller_id = serializers.IntegerField(min_value=1)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.00")
    )
    calorie = serializers.FloatField(min_value=0, default=0)
    image_url = serializers.CharField(
        max_length=500, required=False, allow_blank=True, default=""
    )


class MenuListQuerySerializer(serializers.Serializer):
    seller_id = serializers.IntegerField(min_value=1, required=False)
