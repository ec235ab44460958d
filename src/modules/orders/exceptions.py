"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from modules.core.exceptions import DomainError
from modules.orders.constants import MAX_LINE_QUANTITY


class OrderNotFound(DomainError):
    """The requested order does not exist."""

    code = "order_not_found"

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order {order_id} not found.", order_id=order_id)
        self.order_id = order_id


class EmptyOrder(DomainError):
    """An order was requested without any line items."""

    code = "empty_order"

    def __init__(self) -> None:
        super().__init__("Order must have at least one line item.")


class InvalidQuantity(DomainError):
    """A line item quantity is not an integer in ``1..MAX_LINE_QUANTITY``."""

    code = "invalid_quantity"

    def __init__(self, menu_id: int, quantity: Any = None) -> None:
        super().__init__(
            f"Quantity for menu {menu_id} must be an integer between 1 and "
            f"{MAX_LINE_QUANTITY}.",
            menu_id=menu_id,
        )
        self.menu_id = menu_id
        self.quantity = quantity


class InvalidTransition(DomainError):
    """The order's current status does not allow the requested transition."""

    code = "invalid_transition"

    def __init__(
        self, from_status: str, to_status: str, order_id: Optional[int] = None
    ) -> None:
        super().__init__(
            f"Cannot transition from {from_status} to {to_status}.",
            order_id=order_id,
            from_status=str(from_status),
            to_status=str(to_status),
        )
        self.from_status = from_status
        self.to_status = to_status
        self.order_id = order_id


class OrderTotalOutOfRange(DomainError):
    """The order total exceeds what an order can store."""

    code = "order_total_out_of_range"

    def __init__(self, total_price: Decimal, max_total: Decimal) -> None:
        super().__init__(
            f"Order total {total_price} exceeds the maximum of {max_total}.",
            total_price=str(total_price),
            max_total=str(max_total),
        )
        self.total_price = total_price
        self.max_total = max_total
