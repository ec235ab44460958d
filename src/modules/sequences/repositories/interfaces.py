"""Sequence repository interface.

The only shared mutable state of the ordering core lives behind this
contract.  Implementations must make ``increment`` indivisible with
respect to every other caller using the same key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.sequences.constants import SequenceKey


class ISequenceRepository(ABC):
    @abstractmethod
    def get(self, key: SequenceKey) -> Optional[int]:
        """Return the last issued value, or ``None`` if never allocated."""

    @abstractmethod
    def increment(self, key: SequenceKey) -> int:
        """Atomically bump the counter and return the new value.

        Creates the row on first use.  Raises ``SequencePersistenceError``
        when the new value cannot be durably reserved.
        """
