"""Catalog resolution for order placement.

Turns requested ``(menu_id, quantity)`` pairs into priced order lines
for a single seller.  Read-only: safe to call repeatedly and from
concurrent workers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Sequence

import structlog

from modules.menus.exceptions import MenuNotFound, MenuSellerMismatch
from modules.orders.constants import MAX_LINE_QUANTITY
from modules.orders.dtos import OrderLineDTO
from modules.orders.exceptions import InvalidQuantity

if TYPE_CHECKING:
    from modules.menus.repositories.interfaces import IMenuRepository
    from modules.orders.dtos import CreateOrderLineDTO

logger = structlog.get_logger(__name__)


def _is_valid_quantity(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 < value <= MAX_LINE_QUANTITY
    )


class CatalogResolver:
    """Validates and prices requested lines against the menu catalog."""

    def __init__(self, menu_repository: IMenuRepository) -> None:
        self._menu_repo = menu_repository

    def resolve(
        self, seller_id: int, lines: Sequence[CreateOrderLineDTO]
    ) -> List[OrderLineDTO]:
        """Resolve every requested line, preserving input order.

        The first failing line aborts the whole call.

        Raises:
            MenuNotFound: a menu does not exist.
            MenuSellerMismatch: a menu belongs to another seller.
            InvalidQuantity: a quantity is not an integer in
                ``1..MAX_LINE_QUANTITY``.
            CatalogPersistenceError: the catalog could not be read.
        """
        log = logger.bind(seller_id=seller_id, line_count=len(lines))
        resolved: List[OrderLineDTO] = []

        for request in lines:
            menu = self._menu_repo.get_by_id(request.menu_id)
            if menu is None:
                log.warning("catalog.menu_not_found", menu_id=request.menu_id)
                raise MenuNotFound(request.menu_id)
            if menu.seller_id != seller_id:
                log.warning(
                    "catalog.seller_mismatch",
                    menu_id=request.menu_id,
                    owner_id=menu.seller_id,
                )
                raise MenuSellerMismatch(request.menu_id, seller_id)
            if not _is_valid_quantity(request.quantity):
                log.warning(
                    "catalog.invalid_quantity",
                    menu_id=request.menu_id,
                    quantity=request.quantity,
                )
                raise InvalidQuantity(request.menu_id, request.quantity)

            resolved.append(
                OrderLineDTO(
                    menu_id=menu.menu_id,
                    menu=menu,
                    quantity=request.quantity,
                    line_total=menu.price * request.quantity,
                )
            )

        log.debug("catalog.resolved")
        return resolved
