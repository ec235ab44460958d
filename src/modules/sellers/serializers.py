"""Seller DRF serializers for API input."""

from __future__ import annotations

from rest_framework import serializers


class CreateSellerSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    address = serializers.CharField(required=False, allow_blank=True, default="")
    phone_number = serializers.CharField(
        max_length=32, required=False, allow_blank=True, default=""
    )
    open_hour = serializers.IntegerField(min_value=0, max_value=23, default=0)
    closed_hour = serializers.IntegerField(min_value=0, max_value=23, default=0)


class UpdateAddressSerializer(serializers.Serializer):
    address = serializers.CharField(allow_blank=False)
