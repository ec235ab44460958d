"""Menu service layer (Use Cases).

A menu may only be published by a registered seller; it receives its
``menu_id`` from the sequence allocator after that check passes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.menus.dtos import MenuDTO, UpdateMenuPrice
from modules.menus.exceptions import MenuNotFound
from modules.sellers.exceptions import SellerNotFound
from modules.sequences.constants import MENU_SEQUENCE

if TYPE_CHECKING:
    from decimal import Decimal

    from modules.menus.dtos import CreateMenuDTO
    from modules.menus.repositories.interfaces import IMenuRepository
    from modules.sellers.repositories.interfaces import ISellerRepository
    from modules.sequences.services import SequenceAllocator

logger = structlog.get_logger(__name__)


class MenuService:
    """Application service for Menu use-cases."""

    def __init__(
        self,
        menu_repository: IMenuRepository,
        seller_repository: ISellerRepository,
        allocator: SequenceAllocator,
    ) -> None:
        self._menu_repo = menu_repository
        self._seller_repo = seller_repository
        self._allocator = allocator

    def create_menu(self, dto: CreateMenuDTO) -> MenuDTO:
        """Publish a menu for an existing seller.

        Raises:
            SellerNotFound: the seller does not exist.
            SequencePersistenceError: no ``menu_id`` could be reserved.
        """
        log = logger.bind(seller_id=dto.seller_id)
        if not self._seller_repo.get_by_id(dto.seller_id):
            log.warning("menu.unknown_seller")
            raise SellerNotFound(dto.seller_id)

        menu_id = self._allocator.next(MENU_SEQUENCE)
        menu = self._menu_repo.insert(MenuDTO(menu_id=menu_id, **dto.model_dump()))
        log.info("menu.created", menu_id=menu_id)
        return menu

    def get_menu(self, menu_id: int) -> MenuDTO:
        menu = self._menu_repo.get_by_id(menu_id)
        if not menu:
            raise MenuNotFound(menu_id)
        return menu

    def list_menus(self) -> List[MenuDTO]:
        return self._menu_repo.list()

    def list_by_seller(self, seller_id: int) -> List[MenuDTO]:
        return self._menu_repo.list_by_seller(seller_id)

    def update_price(self, menu_id: int, price: Decimal) -> MenuDTO:
        menu = self._menu_repo.apply(UpdateMenuPrice(menu_id=menu_id, price=price))
        if not menu:
            raise MenuNotFound(menu_id)
        logger.info("menu.price_updated", menu_id=menu_id, price=str(price))
        return menu
