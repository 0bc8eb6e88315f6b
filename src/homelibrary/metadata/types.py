# ABOUTME: Result type returned by metadata lookups against external book providers.
# ABOUTME: LookupResult is the interchange format between providers, the cache, and the add flow.

from dataclasses import dataclass, field, replace


@dataclass
class LookupResult:
    """Book details resolved from an external provider.

    cover_data is only set when the cover was pre-fetched successfully;
    cover_url is kept either way so the image can be fetched again later.
    """

    title: str
    authors: list[str] = field(default_factory=list)
    genre: str | None = None
    cover_url: str | None = None
    cover_data: bytes | None = None
    isbn: str | None = None
    description: str | None = None
    source: str = ""

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    @property
    def has_cover(self) -> bool:
        """Whether pre-fetched cover bytes are present."""
        return self.cover_data is not None and len(self.cover_data) > 0

    def with_cover_data(self, data: bytes) -> "LookupResult":
        return replace(self, cover_data=data)
