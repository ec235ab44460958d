"""Sequence allocator.

Hands out small positive integer identifiers for entity collections.
Values for one key are unique and strictly increasing; they are not
gap-free, since a value reserved by a caller that then fails is never
handed out again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from modules.sequences.exceptions import SequencePersistenceError

if TYPE_CHECKING:
    from modules.sequences.constants import SequenceKey
    from modules.sequences.repositories.interfaces import ISequenceRepository

logger = structlog.get_logger(__name__)


class SequenceAllocator:
    """Issues the next identifier for a named sequence.

    Receives an ``ISequenceRepository`` via constructor injection (DIP).
    All mutation goes through the repository's atomic ``increment``;
    the allocator never reads a value and writes it back itself.
    """

    def __init__(self, repository: ISequenceRepository) -> None:
        self._repo = repository

    def next(self, key: SequenceKey) -> int:
        """Reserve and return the next value for *key*.

        Raises:
            SequencePersistenceError: the value could not be reserved.
        """
        log = logger.bind(sequence=str(key))
        try:
            value = self._repo.increment(key)
        except SequencePersistenceError:
            log.error("sequence.allocation_failed")
            raise

        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            log.error("sequence.invalid_value", value=value)
            raise SequencePersistenceError(key, f"Store returned {value!r}.")

        log.debug("sequence.allocated", value=value)
        return value

    def current(self, key: SequenceKey) -> Optional[int]:
        """Return the last value issued for *key* without reserving one."""
        return self._repo.get(key)
