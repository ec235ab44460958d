"""Sequence repositories package."""

from modules.sequences.repositories.django_repository import SequenceDjangoRepository
from modules.sequences.repositories.interfaces import ISequenceRepository

__all__ = ["ISequenceRepository", "SequenceDjangoRepository"]
