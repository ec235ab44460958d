"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Entities are addressed by their integer business identifier.  There is
no generic "update arbitrary field" operation: each repository accepts
its own closed set of typed patches through ``apply``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")
P = TypeVar("P")


class IRepository(ABC, Generic[T, P]):
    """Base generic repository contract.

    Type parameter ``T`` is the immutable entity DTO managed by the
    repository (e.g. ``SellerDTO``); ``P`` is the union of patch types it
    accepts.
    """

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Store a new entity and return it as persisted."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its business identifier."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities with optional equality filters."""

    @abstractmethod
    def apply(self, patch: P) -> Optional[T]:
        """Apply a typed patch; return the updated entity or ``None`` if absent."""
