"""Sequence counter rows.

One row per ``(collection_name, identifier)`` holding the last value
issued.  Rows are created lazily on first allocation and are only ever
mutated through the repository's atomic increment.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Sequence(BaseModel):
    collection_name: models.CharField = models.CharField(max_length=64)
    identifier: models.CharField = models.CharField(max_length=64)
    value: models.PositiveBigIntegerField = models.PositiveBigIntegerField(default=0)

    class Meta:
        db_table = "sequences"
        constraints = [
            models.UniqueConstraint(
                fields=["collection_name", "identifier"],
                name="sequences_key_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.collection_name}.{self.identifier} = {self.value}"
