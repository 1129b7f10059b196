"""Process-local persisted query storage on cachetools."""

import fnmatch
import math
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]

from persistql.core.entities.apq_config import APQConfig


class _Entry(NamedTuple):
    value: bytes
    ttl: float | None


class InMemoryCacheBackend:
    """Process-local backend with LRU eviction and per-entry expiry.

    Entries live until evicted, deleted or past their TTL. An entry
    stored without a TTL falls back to ``default_ttl``; if that is None
    too, it never expires. The cachetools structure is not thread-safe on
    its own, so every access holds a reentrant lock.

    Registrations made in one process are not visible to other worker
    processes. Use the Redis backend for multi-process deployments.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the backend.

        Args:
            maxsize: Number of entries kept before the least recently
                used one is evicted.
            default_ttl: Expiry in seconds for entries stored without a TTL.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._entries: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=maxsize,
            ttu=self._expires_at,
            timer=timer,
        )
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: APQConfig) -> "InMemoryCacheBackend":
        """Build a backend sized by ``max_size`` and expiring after ``ttl``."""
        return cls(
            maxsize=config.max_size,
            default_ttl=None if config.ttl is None else config.ttl.total_seconds(),
        )

    @staticmethod
    def _expires_at(key: str, entry: _Entry, now: float) -> float:
        return math.inf if entry.ttl is None else now + entry.ttl

    async def get(self, key: str) -> bytes | None:
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        seconds = ttl.total_seconds() if ttl is not None else self._default_ttl
        with self._lock:
            self._entries[key] = _Entry(value, seconds)

    async def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    async def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a case-sensitive glob pattern.

        Returns:
            Number of keys deleted.
        """
        with self._lock:
            self._entries.expire()
            matching = [k for k in self._entries if fnmatch.fnmatchcase(k, pattern)]
            for key in matching:
                del self._entries[key]
        return len(matching)

    def __len__(self) -> int:
        with self._lock:
            self._entries.expire()
            return len(self._entries)

    @property
    def maxsize(self) -> int:
        return self._maxsize
