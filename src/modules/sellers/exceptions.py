"""Seller domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainError


class SellerNotFound(DomainError):
    """The referenced seller does not exist."""

    code = "seller_not_found"

    def __init__(self, seller_id: int) -> None:
        super().__init__(f"Seller {seller_id} not found.", seller_id=seller_id)
        self.seller_id = seller_id
