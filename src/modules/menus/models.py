"""Menu document.

A menu is owned by exactly one seller.  ``seller_id`` is the seller's
business identifier, stored as a plain integer like every cross-document
reference in this store.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Menu(BaseModel):
    menu_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField(
        unique=True
    )
    seller_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField(
        db_index=True
    )
    name: models.CharField = models.CharField(max_length=255)
    description: models.TextField = models.TextField(blank=True, default="")
    price: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    calorie: models.FloatField = models.FloatField(
        default=0, validators=[MinValueValidator(0)]
    )
    image_url: models.CharField = models.CharField(
        max_length=500, blank=True, default=""
    )

    class Meta:
        db_table = "menus"
        ordering = ["menu_id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="menus_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} (#{self.menu_id}, seller {self.seller_id})"
