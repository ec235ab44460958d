"""Seller document."""

from __future__ import annotations

from django.core.validators import MaxValueValidator
from django.db import models

from modules.core.models import BaseModel


class Seller(BaseModel):
    seller_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField(
        unique=True
    )
    name: models.CharField = models.CharField(max_length=255)
    address: models.TextField = models.TextField(blank=True, default="")
    phone_number: models.CharField = models.CharField(
        max_length=32, blank=True, default=""
    )
    open_hour: models.PositiveSmallIntegerField = models.PositiveSmallIntegerField(
        default=0, validators=[MaxValueValidator(23)]
    )
    closed_hour: models.PositiveSmallIntegerField = models.PositiveSmallIntegerField(
        default=0, validators=[MaxValueValidator(23)]
    )

    class Meta:
        db_table = "sellers"
        ordering = ["seller_id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.seller_id})"
