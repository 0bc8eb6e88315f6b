# ABOUTME: Open Library metadata provider implementation.
# ABOUTME: Looks up a single ISBN through the Books API and prefers its covers service.

import logging

from homelibrary.errors import NetworkError
from homelibrary.metadata.http import HttpClient
from homelibrary.metadata.openlibrary_parser import parse_books_response
from homelibrary.metadata.types import LookupResult

logger = logging.getLogger(__name__)

_BOOKS_API_URL = "https://openlibrary.org/api/books"


def books_api_url(isbn: str) -> str:
    return f"{_BOOKS_API_URL}?bibkeys=ISBN:{isbn}&format=json&jscmd=data"


class OpenLibraryProvider:
    """Metadata provider backed by the Open Library Books API.

    Consulted first for ISBN lookups because its covers service returns
    better images. Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    async def search_by_isbn(self, isbn: str) -> LookupResult | None:
        """Look up an already-normalized ISBN.

        Returns None on any network failure, non-2xx status, malformed
        body, or a response without a usable title.
        """
        try:
            response = await self._http.get(books_api_url(isbn))
            response.raise_for_status()
            data = response.json()
        except NetworkError as exc:
            logger.warning("Open Library lookup failed for %s: %s", isbn, exc)
            return None

        result = parse_books_response(data, isbn)
        if result is None:
            logger.info("Open Library has no usable record for %s", isbn)
        return result
