"""Event handlers for Orders domain events."""

from __future__ import annotations

import structlog

from modules.orders.events import OrderCreated, OrderStatusChanged
from shared.domain.bus import IEventBus, IEventHandler

logger = structlog.get_logger(__name__)


class OrderCreatedHandler(IEventHandler[OrderCreated]):
    def handle(self, event: OrderCreated) -> None:
        logger.info("order.event.created", order_id=event.aggregate_id)


class OrderStatusChangedHandler(IEventHandler[OrderStatusChanged]):
    def handle(self, event: OrderStatusChanged) -> None:
        logger.info(
            "order.event.status_changed",
            order_id=event.aggregate_id,
            old_status=event.old_status,
            new_status=event.new_status,
        )


def register_order_handlers(bus: IEventBus) -> None:
    bus.subscribe(OrderCreated, OrderCreatedHandler())
    bus.subscribe(OrderStatusChanged, OrderStatusChangedHandler())
