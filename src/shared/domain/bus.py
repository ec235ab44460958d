"""Domain bus interfaces for in-process event handling.

Events are published synchronously, after the write they describe has
been stored.  Handlers run in subscription order on the caller's thread.
"""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None:
        """Register *handler* for *event_class*; registering twice is a no-op."""
        ...
