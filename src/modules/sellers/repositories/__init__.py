"""Seller repositories package."""

from modules.sellers.repositories.django_repository import SellerDjangoRepository
from modules.sellers.repositories.interfaces import ISellerRepository

__all__ = ["ISellerRepository", "SellerDjangoRepository"]
