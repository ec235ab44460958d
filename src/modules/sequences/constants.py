"""Sequence keys, one per entity collection.

Each key owns its own counter row, so allocations for different entity
types never contend with each other.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SequenceKey:
    collection_name: str
    identifier: str

    def __str__(self) -> str:
        return f"{self.collection_name}.{self.identifier}"


SELLER_SEQUENCE = SequenceKey("sellers", "seller_id")
CUSTOMER_SEQUENCE = SequenceKey("customers", "customer_id")
MENU_SEQUENCE = SequenceKey("menus", "menu_id")
ORDER_SEQUENCE = SequenceKey("orders", "order_id")

# First value handed out for a key that has never been allocated.
SEQUENCE_START = 1

SEQUENCE_MAX_RETRIES = 5
