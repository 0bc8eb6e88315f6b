# ABOUTME: Unit tests for the TTL lookup cache.

import asyncio

from homelibrary.metadata.cache import DEFAULT_TTL_SECONDS, CacheEntry, LookupCache
from homelibrary.metadata.types import LookupResult


class TestCacheEntry:
    """Tests for CacheEntry expiry."""

    def test_expiry_boundary(self) -> None:
        """An entry is fresh at exactly ttl seconds and stale just after."""
        entry = CacheEntry(result=LookupResult(title="T"), stored_at=100.0)
        assert entry.is_expired(100.0 + 3600, 3600) is False
        assert entry.is_expired(100.0 + 3600.5, 3600) is True


class TestLookupCache:
    """Tests for LookupCache."""

    def test_default_ttl_is_one_hour(self) -> None:
        """Entries live for an hour by default."""
        assert DEFAULT_TTL_SECONDS == 3600
        assert LookupCache().ttl == 3600

    def test_put_get_and_lazy_expiry(self) -> None:
        """Expired entries read as misses but stay stored until overwritten."""
        now = [0.0]
        cache = LookupCache(ttl=10, clock=lambda: now[0])
        result = LookupResult(title="Dune")

        cache.put("9780441172719", result)
        assert cache.get("9780441172719") is result

        now[0] = 11
        assert cache.get("9780441172719") is None
        assert "9780441172719" in cache
        assert len(cache) == 1

    def test_missing_key(self) -> None:
        """Unknown keys are misses."""
        assert LookupCache().get("nope") is None

    def test_clear(self) -> None:
        """clear() empties the cache."""
        cache = LookupCache()
        cache.put("a", LookupResult(title="A"))
        cache.clear()
        assert len(cache) == 0

    def test_lock_per_key(self) -> None:
        """The same key always yields the same lock; different keys don't share one."""

        async def locks() -> tuple[asyncio.Lock, asyncio.Lock, asyncio.Lock]:
            cache = LookupCache()
            return cache.lock_for("a"), cache.lock_for("a"), cache.lock_for("b")

        first, again, other = asyncio.run(locks())
        assert first is again
        assert first is not other

    def test_locked_drops_lock_after_use(self) -> None:
        """A key's lock is forgotten once nobody holds or waits for it."""

        async def use() -> int:
            cache = LookupCache()
            async with cache.locked("a"):
                assert cache.lock_count == 1
            return cache.lock_count

        assert asyncio.run(use()) == 0

    def test_locked_is_shared_while_contended(self) -> None:
        """Waiting tasks share the holder's lock and run one at a time."""
        order: list[str] = []

        async def worker(cache: LookupCache, name: str) -> None:
            async with cache.locked("a"):
                order.append(f"{name} in")
                await asyncio.sleep(0)
                order.append(f"{name} out")

        async def contend() -> int:
            cache = LookupCache()
            await asyncio.gather(worker(cache, "first"), worker(cache, "second"))
            return cache.lock_count

        assert asyncio.run(contend()) == 0
        assert order == ["first in", "first out", "second in", "second out"]
