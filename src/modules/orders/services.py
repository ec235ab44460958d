"""Order service layer (Use Cases).

Entry point for the API layer.  Looks up the parties of an order,
derives its addresses and delegates to the assembler and the lifecycle:

- the source address is the seller's address;
- the delivery address is the customer's address unless the request
  names another one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from modules.customers.exceptions import CustomerNotFound
from modules.orders.exceptions import OrderNotFound
from modules.sellers.exceptions import SellerNotFound

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.assembler import OrderAssembler
    from modules.orders.dtos import CreateOrderDTO, OrderDTO
    from modules.orders.lifecycle import OrderLifecycle
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.sellers.repositories.interfaces import ISellerRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives its collaborators via constructor injection (DIP).
    """

    def __init__(
        self,
        assembler: OrderAssembler,
        lifecycle: OrderLifecycle,
        order_repository: IOrderRepository,
        seller_repository: ISellerRepository,
        customer_repository: ICustomerRepository,
    ) -> None:
        self._assembler = assembler
        self._lifecycle = lifecycle
        self._order_repo = order_repository
        self._seller_repo = seller_repository
        self._customer_repo = customer_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_order(self, dto: CreateOrderDTO) -> OrderDTO:
        """Place an order for a known customer at a known seller.

        Raises:
            CustomerNotFound: the customer does not exist.
            SellerNotFound: the seller does not exist.
            plus everything ``OrderAssembler.create`` raises.
        """
        log = logger.bind(customer_id=dto.customer_id, seller_id=dto.seller_id)
        log.info("order.placement_started", line_count=len(dto.lines))

        customer = self._customer_repo.get_by_id(dto.customer_id)
        if not customer:
            raise CustomerNotFound(dto.customer_id)
        seller = self._seller_repo.get_by_id(dto.seller_id)
        if not seller:
            raise SellerNotFound(dto.seller_id)

        return self._assembler.create(
            customer_id=customer.customer_id,
            seller_id=seller.seller_id,
            source_address=seller.address,
            delivery_address=dto.delivery_address or customer.address,
            lines=dto.lines,
        )

    def accept_order(self, order_id: int) -> OrderDTO:
        return self._lifecycle.accept(self.get_order(order_id))

    def reject_order(self, order_id: int) -> OrderDTO:
        return self._lifecycle.reject(self.get_order(order_id))

    def cancel_order(self, order_id: int) -> OrderDTO:
        return self._lifecycle.cancel(self.get_order(order_id))

    def complete_order(self, order_id: int) -> OrderDTO:
        return self._lifecycle.complete(self.get_order(order_id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int) -> OrderDTO:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(order_id)
        return order

    def list_orders(
        self,
        seller_id: Optional[int] = None,
        customer_id: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[OrderDTO]:
        """Return orders filtered by seller, buyer and/or status."""
        filters: Dict[str, Any] = {}
        if seller_id is not None:
            filters["seller_id"] = seller_id
        if customer_id is not None:
            filters["customer_id"] = customer_id
        if status is not None:
            filters["status"] = status
        return self._order_repo.list(filters or None)
