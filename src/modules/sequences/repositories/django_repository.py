"""Django ORM implementation of the Sequence repository.

``increment`` runs one transaction per attempt: an ``UPDATE ... SET
value = value + 1`` takes the row lock, and the new value is read back
inside the same transaction before the lock is released.  A missing row
is created with the start value; two callers racing to create the same
row collide on the unique constraint and the loser retries.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import DatabaseError, IntegrityError, OperationalError, transaction
from django.db.models import F
from django.utils import timezone

from modules.sequences.constants import (
    SEQUENCE_MAX_RETRIES,
    SEQUENCE_START,
    SequenceKey,
)
from modules.sequences.exceptions import SequencePersistenceError
from modules.sequences.models import Sequence
from modules.sequences.repositories.interfaces import ISequenceRepository

logger = structlog.get_logger(__name__)


class SequenceDjangoRepository(ISequenceRepository):
    """Concrete Sequence repository backed by Django ORM."""

    def __init__(self, max_retries: int = SEQUENCE_MAX_RETRIES) -> None:
        self._max_retries = max_retries

    def get(self, key: SequenceKey) -> Optional[int]:
        try:
            return (
                Sequence.objects.filter(
                    collection_name=key.collection_name,
                    identifier=key.identifier,
                )
                .values_list("value", flat=True)
                .first()
            )
        except DatabaseError as exc:
            raise SequencePersistenceError(key, "Read failed.") from exc

    def increment(self, key: SequenceKey) -> int:
        log = logger.bind(sequence=str(key))
        last_error: Optional[DatabaseError] = None

        for attempt in range(1, self._max_retries + 1):
            try:
                return self._increment_once(key)
            except (IntegrityError, OperationalError) as exc:
                # Lost the lazy-creation race, or the row lock timed out.
                log.warning(
                    "sequence.increment_conflict",
                    attempt=attempt,
                    error=str(exc),
                )
                last_error = exc
            except DatabaseError as exc:
                raise SequencePersistenceError(key, "Store unavailable.") from exc

        raise SequencePersistenceError(
            key, f"Gave up after {self._max_retries} attempts."
        ) from last_error

    @transaction.atomic
    def _increment_once(self, key: SequenceKey) -> int:
        rows = Sequence.objects.filter(
            collection_name=key.collection_name,
            identifier=key.identifier,
        ).update(value=F("value") + 1, updated_at=timezone.now())

        if not rows:
            Sequence.objects.create(
                collection_name=key.collection_name,
                identifier=key.identifier,
                value=SEQUENCE_START,
            )
            return SEQUENCE_START

        return (
            Sequence.objects.filter(
                collection_name=key.collection_name,
                identifier=key.identifier,
            )
            .values_list("value", flat=True)
            .get()
        )
