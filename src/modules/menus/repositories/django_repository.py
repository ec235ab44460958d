"""Django ORM implementation of the Menu repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import DatabaseError

from modules.menus.dtos import MenuDTO, MenuPatch, UpdateMenuPrice
from modules.menus.exceptions import CatalogPersistenceError
from modules.menus.models import Menu
from modules.menus.repositories.interfaces import IMenuRepository

logger = structlog.get_logger(__name__)


class MenuDjangoRepository(IMenuRepository):
    """Concrete Menu repository backed by Django ORM."""

    def insert(self, entity: MenuDTO) -> MenuDTO:
        menu = Menu.objects.create(**entity.model_dump())
        logger.info("menu.stored", menu_id=menu.menu_id, seller_id=menu.seller_id)
        return MenuDTO.from_entity(menu)

    def get_by_id(self, id: int) -> Optional[MenuDTO]:
        try:
            menu = Menu.objects.filter(menu_id=id).first()
        except DatabaseError as exc:
            logger.error("menu.read_failed", menu_id=id)
            raise CatalogPersistenceError(id) from exc
        return MenuDTO.from_entity(menu) if menu else None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[MenuDTO]:
        queryset = Menu.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        try:
            return [MenuDTO.from_entity(m) for m in queryset]
        except DatabaseError as exc:
            logger.error("menu.list_failed", filters=filters)
            raise CatalogPersistenceError() from exc

    def list_by_seller(self, seller_id: int) -> List[MenuDTO]:
        return self.list({"seller_id": seller_id})

    def apply(self, patch: MenuPatch) -> Optional[MenuDTO]:
        if not isinstance(patch, UpdateMenuPrice):
            raise TypeError(f"Unsupported menu patch {type(patch).__name__}.")

        menu = Menu.objects.filter(menu_id=patch.menu_id).first()
        if not menu:
            return None

        changes = patch.changes()
        for field, value in changes.items():
            setattr(menu, field, value)
        menu.save(update_fields=list(changes))
        logger.info("menu.patched", menu_id=menu.menu_id, fields=list(changes))
        return MenuDTO.from_entity(menu)
