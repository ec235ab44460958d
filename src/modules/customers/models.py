"""Customer document."""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    customer_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField(
        unique=True
    )
    name: models.CharField = models.CharField(max_length=255)
    address: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["customer_id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.customer_id})"
