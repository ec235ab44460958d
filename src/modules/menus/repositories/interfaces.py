"""Menu repository interface.

The order flow only ever reads through ``get_by_id``; writes come from
the menu use-cases.  Implementations report read failures as
``CatalogPersistenceError``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.menus.dtos import MenuDTO, MenuPatch


class IMenuRepository(IRepository["MenuDTO", "MenuPatch"]):
    """Repository contract for menus."""

    @abstractmethod
    def list_by_seller(self, seller_id: int) -> List[MenuDTO]:
        """List the menus published by a seller."""
