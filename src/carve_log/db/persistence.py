"""Whole-collection persistence into a key-value slot.

Each save rewrites the full collection as a JSON array of field-tagged
records. Persistence is best effort: a failed save leaves the previous
value in place and a failed load yields an empty collection. Neither ever
raises to the caller.
"""

import json
import logging
from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar

import aiosqlite

from .repositories import KeyValueRepository

logger = logging.getLogger(__name__)


class Storable(Protocol):
    def to_dict(self) -> dict: ...

    @classmethod
    def from_dict(cls, data: dict) -> "Storable": ...


T = TypeVar("T", bound=Storable)


class CollectionSlot(Generic[T]):
    """Persists a collection of records under one well-known key."""

    def __init__(
        self, repository: KeyValueRepository, key: str, record_type: type[T]
    ):
        self.repository = repository
        self.key = key
        self.record_type = record_type

    async def save(self, items: Iterable[T]) -> bool:
        """Write the full collection. Returns False if nothing was written."""
        try:
            payload = json.dumps([item.to_dict() for item in items]).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.warning("Could not encode %s, keeping previous data: %s", self.key, e)
            return False

        try:
            await self.repository.set(self.key, payload)
        except (aiosqlite.Error, OSError) as e:
            logger.warning("Could not write %s: %s", self.key, e)
            return False
        return True

    async def load(self) -> list[T]:
        """Read the full collection, or an empty list if there is none."""
        try:
            payload = await self.repository.get(self.key)
        except (aiosqlite.Error, OSError) as e:
            logger.warning("Could not read %s, starting empty: %s", self.key, e)
            return []

        if payload is None:
            return []

        try:
            raw = json.loads(payload)
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            return [self.record_type.from_dict(item) for item in raw]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Discarding unreadable %s data: %s", self.key, e)
            return []
