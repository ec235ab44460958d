"""Order lifecycle state machine.

``CREATED`` is the initial status.  From there an order is accepted,
rejected or cancelled; an accepted order is completed or cancelled.
``REJECTED``, ``CANCELLED`` and ``COMPLETED`` are terminal.

A transition is persisted as a conditional write of the single
``status`` field, guarded on the status the transition was validated
against.  Retrying a transition that already happened fails with
``InvalidTransition`` instead of silently succeeding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from modules.orders.constants import INITIAL_STATUS, VALID_TRANSITIONS, OrderStatus
from modules.orders.dtos import UpdateOrderStatus
from modules.orders.events import OrderStatusChanged
from modules.orders.exceptions import InvalidTransition, OrderNotFound

if TYPE_CHECKING:
    from modules.orders.dtos import OrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class OrderLifecycle:
    initial_status = INITIAL_STATUS

    def __init__(
        self,
        order_repository: IOrderRepository,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._event_bus = event_bus

    @staticmethod
    def can_transition(from_status: str, to_status: str) -> bool:
        return to_status in VALID_TRANSITIONS.get(from_status, set())

    def accept(self, order: OrderDTO) -> OrderDTO:
        return self.transition(order, OrderStatus.ACCEPTED)

    def reject(self, order: OrderDTO) -> OrderDTO:
        return self.transition(order, OrderStatus.REJECTED)

    def cancel(self, order: OrderDTO) -> OrderDTO:
        return self.transition(order, OrderStatus.CANCELLED)

    def complete(self, order: OrderDTO) -> OrderDTO:
        return self.transition(order, OrderStatus.COMPLETED)

    def transition(self, order: OrderDTO, to_status: OrderStatus) -> OrderDTO:
        """Move *order* to *to_status* and persist the new status.

        Raises:
            InvalidTransition: the move is not allowed from the order's
                status, or the stored order changed status concurrently.
            OrderNotFound: the order is no longer stored.
        """
        log = logger.bind(
            order_id=order.order_id,
            current_status=order.status,
            new_status=to_status,
        )

        if not self.can_transition(order.status, to_status):
            log.warning("order.invalid_transition")
            raise InvalidTransition(order.status, to_status, order_id=order.order_id)

        updated = self._order_repo.apply(
            UpdateOrderStatus(
                order_id=order.order_id,
                status=to_status,
                expected_status=order.status,
            )
        )
        if updated is None:
            stored = self._order_repo.get_by_id(order.order_id)
            if stored is None:
                raise OrderNotFound(order.order_id)
            log.warning("order.transition_conflict", stored_status=stored.status)
            raise InvalidTransition(stored.status, to_status, order_id=order.order_id)

        log.info("order.status_changed")
        if self._event_bus is not None:
            self._event_bus.publish(
                OrderStatusChanged(
                    aggregate_id=order.order_id,
                    old_status=str(order.status),
                    new_status=str(to_status),
                )
            )
        return updated
