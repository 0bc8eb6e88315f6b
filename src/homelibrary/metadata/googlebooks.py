# ABOUTME: Google Books metadata provider implementation.
# ABOUTME: Serves as the ISBN fallback and the only source for title/author search.

import logging
from urllib.parse import quote

from homelibrary.errors import NetworkError
from homelibrary.metadata.googlebooks_parser import parse_volumes_response
from homelibrary.metadata.http import HttpClient
from homelibrary.metadata.types import LookupResult

logger = logging.getLogger(__name__)

_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


def volumes_url(query: str) -> str:
    """Build the volumes search URL. The query must already be URL-safe."""
    return f"{_VOLUMES_URL}?q={query}&maxResults=1"


def title_author_query(title: str, author: str | None = None) -> str:
    """Build an encoded "<title>+inauthor:<author>" search query."""
    query = quote(title, safe="")
    if author:
        query += f"+inauthor:{quote(author, safe='')}"
    return query


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books volumes API.

    Only the first search hit is used. Uses dependency-injected HttpClient
    for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "googlebooks"

    async def search_by_isbn(self, isbn: str) -> LookupResult | None:
        """Search for an already-normalized ISBN with an "isbn:" query."""
        return await self.search(f"isbn:{isbn}")

    async def search_by_title_author(
        self, title: str, author: str | None = None
    ) -> LookupResult | None:
        return await self.search(title_author_query(title, author))

    async def search(self, query: str) -> LookupResult | None:
        """Run one volumes query. Returns None on failure or when nothing usable comes back."""
        try:
            response = await self._http.get(volumes_url(query))
            response.raise_for_status()
            data = response.json()
        except NetworkError as exc:
            logger.warning("Google Books search failed for %s: %s", query, exc)
            return None

        result = parse_volumes_response(data)
        if result is None:
            logger.info("Google Books has no usable result for %s", query)
        return result
