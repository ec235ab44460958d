"""Order document.

The order stores its line items as an embedded list (``order_details``),
each line carrying a snapshot of the menu it was priced from, so later
menu edits never change a placed order.  ``status`` is only ever written
through the lifecycle's conditional status update.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import INITIAL_STATUS, OrderStatus


class Order(BaseModel):
    order_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField(
        unique=True
    )
    customer_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField()
    seller_id: models.PositiveBigIntegerField = models.PositiveBigIntegerField()
    source_address: models.TextField = models.TextField(blank=True, default="")
    delivery_address: models.TextField = models.TextField(blank=True, default="")
    order_details: models.JSONField = models.JSONField(default=list)
    total_price: models.DecimalField = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=INITIAL_STATUS,
    )

    class Meta:
        db_table = "orders"
        ordering = ["order_id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["seller_id", "status"], name="orders_seller_status_idx"),
            models.Index(fields=["customer_id", "status"], name="orders_buyer_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Order #{self.order_id} ({self.status})"
