"""Order domain constants.

Defines status choices and valid status transitions for the order
state machine.
"""

from decimal import Decimal

from django.db import models


class OrderStatus(models.TextChoices):
    CREATED = "CREATED", "Created"
    ACCEPTED = "ACCEPTED", "Accepted"
    REJECTED = "REJECTED", "Rejected"
    CANCELLED = "CANCELLED", "Cancelled"
    COMPLETED = "COMPLETED", "Completed"


INITIAL_STATUS = OrderStatus.CREATED

VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.CREATED: {
        OrderStatus.ACCEPTED,
        OrderStatus.REJECTED,
        OrderStatus.CANCELLED,
    },
    OrderStatus.ACCEPTED: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.REJECTED: set(),
    OrderStatus.CANCELLED: set(),
    OrderStatus.COMPLETED: set(),
}

TERMINAL_STATES: set[str] = {
    OrderStatus.REJECTED,
    OrderStatus.CANCELLED,
    OrderStatus.COMPLETED,
}

# Largest quantity a single order line may request.
MAX_LINE_QUANTITY = 999

# Largest total the ``total_price`` column (12 digits, 2 decimal places) holds.
MAX_TOTAL_PRICE = Decimal("9999999999.99")
