# ABOUTME: Runs metadata lookups for CLI commands inside a short-lived event loop.
# ABOUTME: Owns creation and cleanup of the HTTP client used for a single command.

import asyncio

from homelibrary.metadata.http import LibraryHttpClient
from homelibrary.metadata.lookup import BookLookupService
from homelibrary.metadata.types import LookupResult


def create_http_client() -> LibraryHttpClient:
    """Create the HTTP client used for provider and cover requests."""
    return LibraryHttpClient()


async def _lookup_isbn(isbn: str) -> LookupResult:
    async with create_http_client() as http_client:
        service = BookLookupService(http_client)
        return await service.lookup_by_isbn(isbn)


async def _search_title(title: str, author: str | None) -> LookupResult:
    async with create_http_client() as http_client:
        service = BookLookupService(http_client)
        return await service.search_by_title_author(title, author)


def fetch_by_isbn(isbn: str) -> LookupResult:
    """Look up an ISBN across providers.

    Raises:
        NotFoundError: If no provider returned a usable result.
    """
    return asyncio.run(_lookup_isbn(isbn))


def fetch_by_title(title: str, author: str | None = None) -> LookupResult:
    """Search by title and optional author.

    Raises:
        NotFoundError: If the search returned nothing usable.
    """
    return asyncio.run(_search_title(title, author))
