"""Django ORM implementation of the Seller repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.sellers.dtos import SellerDTO, SellerPatch, UpdateSellerAddress, UpdateSellerHours
from modules.sellers.models import Seller
from modules.sellers.repositories.interfaces import ISellerRepository

logger = structlog.get_logger(__name__)


class SellerDjangoRepository(ISellerRepository):
    """Concrete Seller repository backed by Django ORM."""

    def insert(self, entity: SellerDTO) -> SellerDTO:
        seller = Seller.objects.create(**entity.model_dump())
        logger.info("seller.stored", seller_id=seller.seller_id)
        return SellerDTO.from_entity(seller)

    def get_by_id(self, id: int) -> Optional[SellerDTO]:
        seller = Seller.objects.filter(seller_id=id).first()
        return SellerDTO.from_entity(seller) if seller else None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[SellerDTO]:
        queryset = Seller.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return [SellerDTO.from_entity(s) for s in queryset]

    def apply(self, patch: SellerPatch) -> Optional[SellerDTO]:
        if not isinstance(patch, (UpdateSellerAddress, UpdateSellerHours)):
            raise TypeError(f"Unsupported seller patch {type(patch).__name__}.")

        seller = Seller.objects.filter(seller_id=patch.seller_id).first()
        if not seller:
            return None

        changes = patch.changes()
        for field, value in changes.items():
            setattr(seller, field, value)
        seller.save(update_fields=list(changes))
        logger.info("seller.patched", seller_id=seller.seller_id, fields=list(changes))
        return SellerDTO.from_entity(seller)
