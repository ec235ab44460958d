"""Order DRF serializers for API input.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.  Responses are rendered straight from
the output DTOs.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import OrderStatus


class CreateOrderLineSerializer(serializers.Serializer):
    """Validates a single requested line.

    Quantity range is checked by the catalog resolver, which reports
    the offending menu.
    """

    menu_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField()


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    customer_id = serializers.IntegerField(min_value=1)
    seller_id = serializers.IntegerField(min_value=1)
    menus = CreateOrderLineSerializer(many=True, allow_empty=True)
    delivery_address = serializers.CharField(
        required=False, allow_blank=True, default=""
    )


class OrderListQuerySerializer(serializers.Serializer):
    """Validates the read-projection filters of the order list."""

    seller_id = serializers.IntegerField(min_value=1, required=False)
    customer_id = serializers.IntegerField(min_value=1, required=False)
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
