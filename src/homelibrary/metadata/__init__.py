# ABOUTME: Metadata package for resolving book details from external providers.
# ABOUTME: Exports the lookup service, result type, providers, and HTTP client.

from homelibrary.metadata.cache import LookupCache
from homelibrary.metadata.googlebooks import GoogleBooksProvider
from homelibrary.metadata.http import HttpClient, HttpResponse, LibraryHttpClient
from homelibrary.metadata.lookup import BookLookupService, normalize_isbn
from homelibrary.metadata.openlibrary import OpenLibraryProvider
from homelibrary.metadata.provider import MetadataProvider
from homelibrary.metadata.types import LookupResult

__all__ = [
    "BookLookupService",
    "GoogleBooksProvider",
    "HttpClient",
    "HttpResponse",
    "LibraryHttpClient",
    "LookupCache",
    "LookupResult",
    "MetadataProvider",
    "OpenLibraryProvider",
    "normalize_isbn",
]
