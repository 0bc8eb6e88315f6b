# ABOUTME: MetadataProvider protocol defining the contract for metadata sources.
# ABOUTME: Open Library and Google Books both implement ISBN lookup through it.

from typing import Protocol, runtime_checkable

from homelibrary.metadata.types import LookupResult


@runtime_checkable
class MetadataProvider(Protocol):
    """Protocol for metadata lookup services.

    search_by_isbn returns None when the provider has no usable record or
    the request failed; providers log failures rather than raising them, so
    the caller can move on to the next provider.
    """

    @property
    def name(self) -> str: ...

    async def search_by_isbn(self, isbn: str) -> LookupResult | None: ...
