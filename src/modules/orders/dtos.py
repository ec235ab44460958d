"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateOrderLineDTO``: one requested ``(menu_id, quantity)`` pair.
- ``CreateOrderDTO``: input for order placement.
- ``OrderLineDTO``: a priced line with its menu snapshot.
- ``OrderDTO``: a stored order.
- ``UpdateOrderStatus``: the only mutation a stored order accepts.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from modules.menus.dtos import MenuDTO
from modules.orders.constants import OrderStatus

if TYPE_CHECKING:
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderLineDTO(BaseModel):
    """A requested line item.

    ``quantity`` is deliberately not range-checked here: the catalog
    resolver rejects non-positive quantities with ``InvalidQuantity``.
    """

    model_config = ConfigDict(frozen=True)

    menu_id: int
    quantity: int


class CreateOrderDTO(BaseModel):
    """Order placement request.

    ``delivery_address`` overrides the customer's stored address.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: int
    seller_id: int
    lines: List[CreateOrderLineDTO]
    delivery_address: Optional[str] = None


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderLineDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    menu_id: int
    menu: MenuDTO
    quantity: int
    line_total: Decimal


class OrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: int
    customer_id: int
    seller_id: int
    source_address: str = ""
    delivery_address: str = ""
    order_details: List[OrderLineDTO]
    total_price: Decimal
    status: OrderStatus

    @classmethod
    def from_entity(cls, order: Order) -> OrderDTO:
        return cls(
            order_id=order.order_id,
            customer_id=order.customer_id,
            seller_id=order.seller_id,
            source_address=order.source_address,
            delivery_address=order.delivery_address,
            order_details=order.order_details,
            total_price=order.total_price,
            status=order.status,
        )


# ---------------------------------------------------------------------------
# Patches
# ---------------------------------------------------------------------------


class UpdateOrderStatus(BaseModel):
    """Set ``status``, but only while the stored status is ``expected_status``."""

    model_config = ConfigDict(frozen=True)

    order_id: int
    status: OrderStatus
    expected_status: Optional[OrderStatus] = None

    def changes(self) -> Dict[str, Any]:
        return {"status": self.status}


OrderPatch = UpdateOrderStatus
