#!/usr/bin/env python3
"""
Shared Resource Cache

One keyed cache shared by every live view. Each entry holds the last-known
value of a remote resource and the callbacks of the views observing it.

Writes through the sync controller update or invalidate the affected keys,
so all views see a new transaction as soon as the ledger confirms it.
Fetches for different keys complete in whatever order the network delivers
them; the cache imposes no ordering between them.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

TRANSACTIONS = "transactions"
DASHBOARD_SUMMARY = "dashboard_summary"

Subscriber = Callable[[Any], None]


@dataclass
class CacheEntry:
    """Last-known value of one resource and who is watching it."""

    value: Any = None
    has_value: bool = False
    stale: bool = True
    subscribers: list[Subscriber] = field(default_factory=list)


class ResourceCache:
    """Keyed last-value cache with subscribers and explicit invalidation."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def _entry(self, key: str) -> CacheEntry:
        if key not in self._entries:
            self._entries[key] = CacheEntry()
        return self._entries[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Last-known value for ``key``, or ``default`` if never fetched."""
        entry = self._entries.get(key)
        if entry is None or not entry.has_value:
            return default
        return entry.value

    def has(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.has_value

    def is_stale(self, key: str) -> bool:
        """True until a value is stored, and again after ``invalidate``."""
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def put(self, key: str, value: Any) -> None:
        """Store a fresh value and notify subscribers."""
        entry = self._entry(key)
        entry.value = value
        entry.has_value = True
        entry.stale = False
        self._notify(key, entry)

    def update(self, key: str, fn: Callable[[Any], Any]) -> bool:
        """
        Replace a cached value with ``fn(value)`` and notify subscribers.

        Does nothing for keys that have no value yet, since there is nothing
        to patch.

        Returns:
            True if the value was updated
        """
        entry = self._entries.get(key)
        if entry is None or not entry.has_value:
            return False
        entry.value = fn(entry.value)
        self._notify(key, entry)
        return True

    def invalidate(self, key: str) -> None:
        """Mark ``key`` stale. The value stays readable until refetched."""
        self._entry(key).stale = True
        logger.debug("Invalidated cache key '%s'", key)

    def subscribe(self, key: str, callback: Subscriber) -> Callable[[], None]:
        """
        Observe changes to ``key``.

        Returns:
            A function that removes the subscription
        """
        entry = self._entry(key)
        entry.subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in entry.subscribers:
                entry.subscribers.remove(callback)

        return unsubscribe

    def subscriber_count(self, key: str) -> int:
        entry = self._entries.get(key)
        return len(entry.subscribers) if entry else 0

    def _notify(self, key: str, entry: CacheEntry) -> None:
        # Copy so a callback may unsubscribe while we iterate
        for callback in list(entry.subscribers):
            callback(entry.value)
