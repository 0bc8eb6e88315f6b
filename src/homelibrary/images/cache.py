# ABOUTME: Bounded in-memory cache for downloaded cover images, keyed by URL.
# ABOUTME: Limits both entry count and total byte cost, evicting least recently used first.

import logging
from collections import OrderedDict

logger = logging.getLogger(__name__)

DEFAULT_COUNT_LIMIT = 100
DEFAULT_TOTAL_COST_LIMIT = 50 * 1024 * 1024


class ImageCache:
    """LRU cache of image bytes with a count limit and a total cost limit.

    Reads refresh recency. Writes evict from the least recently used end
    until both limits hold again. Nothing is persisted.
    """

    def __init__(
        self,
        count_limit: int = DEFAULT_COUNT_LIMIT,
        total_cost_limit: int = DEFAULT_TOTAL_COST_LIMIT,
    ) -> None:
        self.count_limit = count_limit
        self.total_cost_limit = total_cost_limit
        self._entries: OrderedDict[str, tuple[bytes, int]] = OrderedDict()
        self._total_cost = 0

    @property
    def total_cost(self) -> int:
        return self._total_cost

    def get(self, key: str) -> bytes | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry[0]

    def set(self, key: str, image: bytes, cost: int | None = None) -> None:
        """Store image under key. Cost defaults to the encoded byte size.

        An image whose cost alone exceeds the total cost limit is not kept.
        """
        if cost is None:
            cost = len(image)
        self.remove(key)
        if cost > self.total_cost_limit:
            logger.debug("Not caching %s: cost %d exceeds limit", key, cost)
            return
        self._entries[key] = (image, cost)
        self._total_cost += cost
        self._evict()

    def remove(self, key: str) -> None:
        entry = self._entries.pop(key, None)
        if entry is not None:
            self._total_cost -= entry[1]

    def clear(self) -> None:
        self._entries.clear()
        self._total_cost = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _evict(self) -> None:
        while self._entries and (
            len(self._entries) > self.count_limit
            or self._total_cost > self.total_cost_limit
        ):
            key, (_, cost) = self._entries.popitem(last=False)
            self._total_cost -= cost
            logger.debug("Evicted %s from image cache", key)
