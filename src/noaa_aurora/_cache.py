"""Time-to-live keyed store for fetched artifacts.

Holds one :class:`CacheEntry` per key in memory. Entries are overwritten
on refresh and otherwise only expire; there is no capacity bound and no
eviction. A lookup never raises, anything other than a fresh entry is a
miss.

The store is not thread-safe. A client shared between threads must
serialize the get-then-set sequence itself, otherwise concurrent misses
only duplicate work.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached payload and the clock reading at which it was stored.

    Attributes:
        key: Cache key.
        timestamp: Value of the cache clock when stored [s].
        payload: The stored artifact (bytes or decoded structure).
    """

    key: str
    timestamp: float
    payload: Any


class ResponseCache:
    """In-memory TTL cache owned by a single client instance.

    Args:
        ttl: Time-to-live in seconds. ``0`` disables serving from the
            cache, although :meth:`set` still records entries.
        clock: Monotonic clock returning seconds. Defaults to
            :func:`time.monotonic`.

    Raises:
        ValueError: If *ttl* is negative.
    """

    def __init__(
        self,
        ttl: float = 120.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl < 0:
            raise ValueError(f"Cache TTL must be >= 0, got {ttl}")
        self._ttl = float(ttl)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @property
    def ttl(self) -> float:
        """Time-to-live in seconds."""
        return self._ttl

    @property
    def enabled(self) -> bool:
        """Whether fresh entries can be served."""
        return self._ttl > 0

    def get(self, key: str) -> Any | None:
        """Return the payload stored under *key* if it is still fresh.

        Args:
            key: Cache key.

        Returns:
            The payload, or ``None`` on a miss (no entry, caching
            disabled, or entry older than the TTL).
        """
        entry = self._entries.get(key)
        if entry is None or not self.enabled:
            logger.debug("Cache miss for %r", key)
            return None

        age = self._clock() - entry.timestamp
        if age > self._ttl:
            logger.debug("Cache entry %r expired (age %.1fs)", key, age)
            return None

        logger.debug("Cache hit for %r (age %.1fs)", key, age)
        return entry.payload

    def set(self, key: str, payload: Any) -> Any:
        """Store *payload* under *key*, replacing any previous entry.

        Args:
            key: Cache key.
            payload: Artifact to store.

        Returns:
            *payload*, unchanged.
        """
        self._entries[key] = CacheEntry(key, self._clock(), payload)
        return payload

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResponseCache(ttl={self._ttl}, entries={len(self._entries)})"
