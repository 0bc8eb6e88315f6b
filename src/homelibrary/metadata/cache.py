# ABOUTME: In-memory TTL cache for ISBN lookup results with per-key async locks.
# ABOUTME: Expiry is lazy: stale entries stay stored and read as misses.

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass

from homelibrary.metadata.types import LookupResult

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


@dataclass
class CacheEntry:
    result: LookupResult
    stored_at: float

    def is_expired(self, now: float, ttl: float) -> bool:
        return now - self.stored_at > ttl


class LookupCache:
    """Cache lookup results by normalized ISBN.

    An entry is served while its age is at most ttl seconds. Expired entries
    are not evicted; the next lookup for that key overwrites them.

    locked(key) holds one asyncio.Lock per key so a lookup can make its
    read-check-fetch-write sequence atomic with respect to other lookups of
    the same ISBN. A key's lock is dropped once no task holds or awaits it.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    def lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def locked(self, key: str) -> AsyncIterator[None]:
        """Hold the lock for key, releasing its entry when the last user leaves."""
        lock = self.lock_for(key)
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[key] -= 1
            if not self._lock_users[key]:
                del self._lock_users[key]
                del self._locks[key]

    @property
    def lock_count(self) -> int:
        return len(self._locks)

    def get(self, key: str) -> LookupResult | None:
        """Return the cached result for key, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock(), self.ttl):
            logger.debug("Cache entry for %s expired", key)
            return None
        logger.debug("Cache hit for %s", key)
        return entry.result

    def put(self, key: str, result: LookupResult) -> None:
        self._entries[key] = CacheEntry(result=result, stored_at=self._clock())
        logger.debug("Cached lookup result for %s", key)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
