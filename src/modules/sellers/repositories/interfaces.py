"""Seller repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.sellers.dtos import SellerDTO, SellerPatch


class ISellerRepository(IRepository["SellerDTO", "SellerPatch"]):
    """Repository contract for sellers."""
