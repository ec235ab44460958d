"""Sequence allocation exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.exceptions import DomainError

if TYPE_CHECKING:
    from modules.sequences.constants import SequenceKey


class SequencePersistenceError(DomainError):
    """A value could not be durably reserved for the sequence.

    Fatal to the current creation attempt; the caller may retry the
    whole operation.
    """

    code = "sequence_persistence_error"

    def __init__(self, key: SequenceKey, reason: str = "") -> None:
        message = f"Could not allocate the next value for sequence {key}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(
            message,
            collection_name=key.collection_name,
            identifier=key.identifier,
        )
        self.key = key
