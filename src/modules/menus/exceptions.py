"""Menu catalog exceptions.

Raised while resolving requested menu items for an order, and by the
menu use-cases.  Each carries the offending identifiers.
"""

from __future__ import annotations

from modules.core.exceptions import DomainError


class MenuNotFound(DomainError):
    """The referenced menu does not exist."""

    code = "menu_not_found"

    def __init__(self, menu_id: int) -> None:
        super().__init__(f"Menu {menu_id} not found.", menu_id=menu_id)
        self.menu_id = menu_id


class MenuSellerMismatch(DomainError):
    """The menu is owned by a different seller than the order's seller."""

    code = "menu_seller_mismatch"

    def __init__(self, menu_id: int, seller_id: int) -> None:
        super().__init__(
            f"Menu {menu_id} does not belong to seller {seller_id}.",
            menu_id=menu_id,
            seller_id=seller_id,
        )
        self.menu_id = menu_id
        self.seller_id = seller_id


class CatalogPersistenceError(DomainError):
    """The catalog could not be read.  Safe to retry."""

    code = "catalog_persistence_error"

    def __init__(self, menu_id: int | None = None) -> None:
        message = "Menu catalog is unavailable."
        if menu_id is not None:
            message = f"Menu catalog is unavailable while reading menu {menu_id}."
        super().__init__(message, menu_id=menu_id)
        self.menu_id = menu_id
