"""Explicitly constructed application context.

``MarketplaceContext`` owns the repositories and wires the ordering core
on top of them.  Nothing in the core reaches for module-level state:
views call ``build_context()`` and tests construct the context directly
from in-memory repositories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from modules.customers.services import CustomerService
from modules.menus.services import MenuService
from modules.orders.assembler import OrderAssembler
from modules.orders.lifecycle import OrderLifecycle
from modules.orders.resolver import CatalogResolver
from modules.orders.services import OrderService
from modules.sellers.services import SellerService
from modules.sequences.services import SequenceAllocator
from shared.infrastructure.bus import InMemoryEventBus

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.menus.repositories.interfaces import IMenuRepository
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.sellers.repositories.interfaces import ISellerRepository
    from modules.sequences.repositories.interfaces import ISequenceRepository
    from shared.domain.bus import IEventBus


@dataclass
class MarketplaceContext:
    sequences: ISequenceRepository
    sellers: ISellerRepository
    customers: ICustomerRepository
    menus: IMenuRepository
    orders: IOrderRepository
    event_bus: IEventBus = field(default_factory=InMemoryEventBus)

    def __post_init__(self) -> None:
        self.allocator = SequenceAllocator(self.sequences)
        self.resolver = CatalogResolver(self.menus)
        self.lifecycle = OrderLifecycle(self.orders, self.event_bus)
        self.assembler = OrderAssembler(
            resolver=self.resolver,
            allocator=self.allocator,
            order_repository=self.orders,
            event_bus=self.event_bus,
        )

    @property
    def seller_service(self) -> SellerService:
        return SellerService(self.sellers, self.allocator)

    @property
    def customer_service(self) -> CustomerService:
        return CustomerService(self.customers, self.allocator)

    @property
    def menu_service(self) -> MenuService:
        return MenuService(self.menus, self.sellers, self.allocator)

    @property
    def order_service(self) -> OrderService:
        return OrderService(
            assembler=self.assembler,
            lifecycle=self.lifecycle,
            order_repository=self.orders,
            seller_repository=self.sellers,
            customer_repository=self.customers,
        )


def build_context(event_bus: Optional[IEventBus] = None) -> MarketplaceContext:
    """Build a context backed by the Django ORM repositories."""
    from django.conf import settings

    from modules.customers.repositories import CustomerDjangoRepository
    from modules.menus.repositories import MenuDjangoRepository
    from modules.orders.handlers import register_order_handlers
    from modules.orders.repositories import OrderDjangoRepository
    from modules.sellers.repositories import SellerDjangoRepository
    from modules.sequences.repositories import SequenceDjangoRepository

    if event_bus is None:
        event_bus = InMemoryEventBus()
        register_order_handlers(event_bus)

    return MarketplaceContext(
        sequences=SequenceDjangoRepository(max_retries=settings.SEQUENCE_MAX_RETRIES),
        sellers=SellerDjangoRepository(),
        customers=CustomerDjangoRepository(),
        menus=MenuDjangoRepository(),
        orders=OrderDjangoRepository(),
        event_bus=event_bus,
    )
