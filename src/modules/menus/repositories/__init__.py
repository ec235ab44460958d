"""Menu repositories package."""

from modules.menus.repositories.django_repository import MenuDjangoRepository
from modules.menus.repositories.interfaces import IMenuRepository

__all__ = ["IMenuRepository", "MenuDjangoRepository"]
