"""Shared machinery for persistence-backed event stores."""

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from ..db.persistence import CollectionSlot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventStore(Generic[T]):
    """In-memory record collection mirrored into a durable slot.

    The store is the only writer of its collection. Every mutation runs
    under one lock, rewrites the whole slot and then notifies subscribers
    before control returns to the caller. Reads never touch the lock.
    """

    def __init__(self, slot: CollectionSlot[T]):
        self.slot = slot
        self._lock = asyncio.Lock()
        self._subscribers: list[Callable[["EventStore[T]"], None]] = []

    async def load(self) -> None:
        """Populate the store from durable storage."""
        items = await self.slot.load()
        async with self._lock:
            self._restore(items)
        logger.info("Loaded %d %s from storage", len(items), self.slot.key)

    def subscribe(
        self, callback: Callable[["EventStore[T]"], None]
    ) -> Callable[[], None]:
        """Call ``callback(store)`` after every change.

        Returns a function that cancels the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def _commit(self) -> None:
        """Persist and publish the current state. Caller holds the lock."""
        await self.slot.save(self._items())
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("Subscriber %r failed on %s change", callback, self.slot.key)

    def _restore(self, items: list[T]) -> None:
        raise NotImplementedError

    def _items(self) -> list[T]:
        raise NotImplementedError
