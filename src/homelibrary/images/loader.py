# ABOUTME: Loads cover images for display through the in-memory image cache.
# ABOUTME: Serves cached bytes when present, otherwise downloads and caches them.

import logging

from homelibrary.errors import NetworkError
from homelibrary.images.cache import ImageCache
from homelibrary.metadata.http import HttpClient

logger = logging.getLogger(__name__)


class CoverImageLoader:
    """Fetch cover images by URL, caching the downloaded bytes."""

    def __init__(self, http_client: HttpClient, cache: ImageCache | None = None) -> None:
        self._http = http_client
        self.cache = cache if cache is not None else ImageCache()

    async def load(self, url: str) -> bytes | None:
        """Return image bytes for url, or None if it cannot be downloaded."""
        cached = self.cache.get(url)
        if cached is not None:
            return cached

        try:
            response = await self._http.get(url)
            response.raise_for_status()
        except NetworkError as exc:
            logger.warning("Cover download failed for %s: %s", url, exc)
            return None

        if not response.content:
            return None
        self.cache.set(url, response.content)
        return response.content
