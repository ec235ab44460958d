"""Customer DRF serializers for API input."""

from __future__ import annotations

from rest_framework import serializers


class CreateCustomerSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    address = serializers.CharField(required=False, allow_blank=True, default="")
