"""Order repository interface.

Narrows ``IRepository`` to orders.  ``apply`` takes ``UpdateOrderStatus``
and must be conditional: when ``expected_status`` is given, the status
is only written if the stored status still equals it.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.dtos import OrderDTO, OrderPatch


class IOrderRepository(IRepository["OrderDTO", "OrderPatch"]):
    """Repository contract for orders.

    ``list`` supports the ``seller_id``, ``customer_id`` and ``status``
    filter keys.  ``apply`` returns ``None`` when no stored order matched,
    either because it does not exist or because its status has moved on.
    """
