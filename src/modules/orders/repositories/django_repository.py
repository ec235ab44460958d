"""Django ORM implementation of the Order repository.

Each write touches a single row.  Status changes are a single
conditional ``UPDATE ... WHERE status = expected``, so two concurrent
transitions out of the same status cannot both succeed.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.utils import timezone

from modules.orders.dtos import OrderDTO, OrderPatch, UpdateOrderStatus
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

LIST_FILTERS = {"seller_id", "customer_id", "status"}


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def insert(self, entity: OrderDTO) -> OrderDTO:
        order = Order.objects.create(
            order_id=entity.order_id,
            customer_id=entity.customer_id,
            seller_id=entity.seller_id,
            source_address=entity.source_address,
            delivery_address=entity.delivery_address,
            order_details=[
                line.model_dump(mode="json") for line in entity.order_details
            ],
            total_price=entity.total_price,
            status=entity.status,
        )
        logger.info(
            "order.stored",
            order_id=order.order_id,
            line_count=len(entity.order_details),
        )
        return OrderDTO.from_entity(order)

    def get_by_id(self, id: int) -> Optional[OrderDTO]:
        order = Order.objects.filter(order_id=id).first()
        return OrderDTO.from_entity(order) if order else None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[OrderDTO]:
        queryset = Order.objects.all()
        if filters:
            unknown = set(filters) - LIST_FILTERS
            if unknown:
                raise ValueError(f"Unsupported order filters: {sorted(unknown)}.")
            queryset = queryset.filter(**filters)
        return [OrderDTO.from_entity(o) for o in queryset]

    def apply(self, patch: OrderPatch) -> Optional[OrderDTO]:
        if not isinstance(patch, UpdateOrderStatus):
            raise TypeError(f"Unsupported order patch {type(patch).__name__}.")

        queryset = Order.objects.filter(order_id=patch.order_id)
        if patch.expected_status is not None:
            queryset = queryset.filter(status=patch.expected_status)

        rows = queryset.update(**patch.changes(), updated_at=timezone.now())
        if not rows:
            return None

        logger.info(
            "order.status_stored",
            order_id=patch.order_id,
            status=patch.status,
        )
        return self.get_by_id(patch.order_id)
