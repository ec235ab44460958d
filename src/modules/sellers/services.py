"""Seller service layer (Use Cases).

Registers sellers under an identifier issued by the sequence allocator
and exposes the typed address / opening-hours updates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.sellers.dtos import SellerDTO, UpdateSellerAddress, UpdateSellerHours
from modules.sellers.exceptions import SellerNotFound
from modules.sequences.constants import SELLER_SEQUENCE

if TYPE_CHECKING:
    from modules.sellers.dtos import CreateSellerDTO
    from modules.sellers.repositories.interfaces import ISellerRepository
    from modules.sequences.services import SequenceAllocator

logger = structlog.get_logger(__name__)


class SellerService:
    """Application service for Seller use-cases."""

    def __init__(
        self, repository: ISellerRepository, allocator: SequenceAllocator
    ) -> None:
        self._repo = repository
        self._allocator = allocator

    def create_seller(self, dto: CreateSellerDTO) -> SellerDTO:
        """Register a new seller.

        Raises:
            SequencePersistenceError: no ``seller_id`` could be reserved.
        """
        seller_id = self._allocator.next(SELLER_SEQUENCE)
        seller = self._repo.insert(SellerDTO(seller_id=seller_id, **dto.model_dump()))
        logger.info("seller.created", seller_id=seller_id)
        return seller

    def get_seller(self, seller_id: int) -> SellerDTO:
        seller = self._repo.get_by_id(seller_id)
        if not seller:
            raise SellerNotFound(seller_id)
        return seller

    def list_sellers(self) -> List[SellerDTO]:
        return self._repo.list()

    def update_address(self, seller_id: int, address: str) -> SellerDTO:
        seller = self._repo.apply(UpdateSellerAddress(seller_id=seller_id, address=address))
        if not seller:
            raise SellerNotFound(seller_id)
        return seller

    def update_hours(self, seller_id: int, open_hour: int, closed_hour: int) -> SellerDTO:
        seller = self._repo.apply(
            UpdateSellerHours(
                seller_id=seller_id, open_hour=open_hour, closed_hour=closed_hour
            )
        )
        if not seller:
            raise SellerNotFound(seller_id)
        return seller
