# ABOUTME: Book lookup service that cascades across metadata providers with caching.
# ABOUTME: Resolves by ISBN (Open Library, then Google Books) or by title/author (Google Books).

import logging
import re

from homelibrary.errors import NetworkError, NotFoundError
from homelibrary.metadata.cache import LookupCache
from homelibrary.metadata.googlebooks import GoogleBooksProvider
from homelibrary.metadata.http import HttpClient
from homelibrary.metadata.openlibrary import OpenLibraryProvider
from homelibrary.metadata.provider import MetadataProvider
from homelibrary.metadata.types import LookupResult

logger = logging.getLogger(__name__)

_NON_ISBN_CHARS_RE = re.compile(r"[^0-9X]")


def normalize_isbn(isbn: str) -> str:
    """Strip everything except digits and an uppercase 'X' check character."""
    return _NON_ISBN_CHARS_RE.sub("", isbn)


class BookLookupService:
    """Resolves book metadata from external providers.

    ISBN lookups try each provider in order and keep the first usable
    result whole; data from different providers is never merged. Results
    are cached for an hour and their covers pre-fetched so they can be
    shown without another round trip.

    Uses dependency-injected HttpClient for testability; providers and the
    cache can be injected too.
    """

    def __init__(
        self,
        http_client: HttpClient,
        *,
        providers: list[MetadataProvider] | None = None,
        search_provider: GoogleBooksProvider | None = None,
        cache: LookupCache | None = None,
    ) -> None:
        self._http = http_client
        google = search_provider or GoogleBooksProvider(http_client)
        self._providers = (
            providers if providers is not None else [OpenLibraryProvider(http_client), google]
        )
        self._search_provider = google
        self.cache = cache if cache is not None else LookupCache()

    async def lookup_by_isbn(self, isbn: str) -> LookupResult:
        """Look up a book by ISBN.

        Args:
            isbn: ISBN in any formatting; hyphens and spaces are ignored.

        Returns:
            The cached or freshly resolved result.

        Raises:
            NotFoundError: If no provider returned a usable result.
        """
        key = normalize_isbn(isbn)
        if not key:
            raise NotFoundError(f"No book found for ISBN {isbn!r}")

        async with self.cache.locked(key):
            cached = self.cache.get(key)
            if cached is not None:
                return cached

            result = await self._resolve(key)
            if result is None:
                raise NotFoundError(f"No book found for ISBN {key}")

            result = await self._prefetch_cover(result)
            self.cache.put(key, result)
            return result

    async def search_by_title_author(
        self, title: str, author: str | None = None
    ) -> LookupResult:
        """Search Google Books by title and optional author.

        Single attempt with no caching and no cover pre-fetch.

        Raises:
            NotFoundError: If the search returned nothing usable.
        """
        result = await self._search_provider.search_by_title_author(title, author)
        if result is None:
            raise NotFoundError(f"No book found for title {title!r}")
        return result

    async def _resolve(self, isbn: str) -> LookupResult | None:
        for provider in self._providers:
            result = await provider.search_by_isbn(isbn)
            if result is not None:
                logger.info("Resolved %s via %s", isbn, provider.name)
                return result
        return None

    async def _prefetch_cover(self, result: LookupResult) -> LookupResult:
        """Download the cover so it can be shown instantly. Best effort."""
        if not result.cover_url:
            return result
        try:
            response = await self._http.get(result.cover_url)
            response.raise_for_status()
        except NetworkError as exc:
            logger.warning("Cover pre-fetch failed for %s: %s", result.cover_url, exc)
            return result
        if not response.content:
            return result
        return result.with_cover_data(response.content)
