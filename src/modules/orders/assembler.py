"""Order assembly.

Builds an order from resolved catalog lines, reserves its ``order_id``
and hands it to storage.  Nothing is allocated or stored unless every
requested line resolves.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Sequence

import structlog

from modules.orders.constants import MAX_TOTAL_PRICE
from modules.orders.dtos import OrderDTO
from modules.orders.events import OrderCreated
from modules.orders.exceptions import EmptyOrder, OrderTotalOutOfRange
from modules.orders.lifecycle import OrderLifecycle
from modules.sequences.constants import ORDER_SEQUENCE

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderLineDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.orders.resolver import CatalogResolver
    from modules.sequences.services import SequenceAllocator
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderAssembler:
    def __init__(
        self,
        resolver: CatalogResolver,
        allocator: SequenceAllocator,
        order_repository: IOrderRepository,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._resolver = resolver
        self._allocator = allocator
        self._order_repo = order_repository
        self._event_bus = event_bus

    def create(
        self,
        customer_id: int,
        seller_id: int,
        source_address: str,
        delivery_address: str,
        lines: Sequence[CreateOrderLineDTO],
    ) -> OrderDTO:
        """Assemble and store a new order.

        Steps:
        1. Reject an empty line list.
        2. Resolve and price every line (errors surface unchanged).
        3. Sum line totals in input order and check the total is storable.
        4. Reserve an ``order_id``.
        5. Store the order in its initial status.

        Raises:
            EmptyOrder: no lines were requested.
            MenuNotFound, MenuSellerMismatch, InvalidQuantity,
                CatalogPersistenceError: line resolution failed.
            OrderTotalOutOfRange: the total exceeds ``MAX_TOTAL_PRICE``.
            SequencePersistenceError: no ``order_id`` could be reserved.
        """
        log = logger.bind(customer_id=customer_id, seller_id=seller_id)

        if not lines:
            log.warning("order.empty")
            raise EmptyOrder()

        order_details = self._resolver.resolve(seller_id, lines)
        total_price = sum((line.line_total for line in order_details), Decimal("0"))
        if total_price > MAX_TOTAL_PRICE:
            log.warning("order.total_out_of_range", total_price=str(total_price))
            raise OrderTotalOutOfRange(total_price, MAX_TOTAL_PRICE)

        order_id = self._allocator.next(ORDER_SEQUENCE)
        order = OrderDTO(
            order_id=order_id,
            customer_id=customer_id,
            seller_id=seller_id,
            source_address=source_address,
            delivery_address=delivery_address,
            order_details=order_details,
            total_price=total_price,
            status=OrderLifecycle.initial_status,
        )
        stored = self._order_repo.insert(order)

        log.info("order.created", order_id=order_id, total_price=str(total_price))
        if self._event_bus is not None:
            self._event_bus.publish(OrderCreated(aggregate_id=order_id))
        return stored
