# ABOUTME: Decode schema and parsing for the Open Library Books API (bibkeys, jscmd=data).
# ABOUTME: Converts the ISBN-keyed response into a LookupResult with a high-quality cover URL.

from dataclasses import dataclass, field
from typing import Any

from homelibrary.metadata.genres import map_category_to_genre
from homelibrary.metadata.types import LookupResult

_COVERS_BASE_URL = "https://covers.openlibrary.org/b/isbn"


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _names(entries: Any) -> list[str]:
    """Collect the "name" of each {name: ...} entry, skipping malformed ones."""
    if not isinstance(entries, list):
        return []
    names = []
    for entry in entries:
        if isinstance(entry, dict):
            name = _str_or_none(entry.get("name"))
            if name is not None:
                names.append(name)
    return names


@dataclass
class OpenLibraryBook:
    """The fields we read from one entry of a Books API response.

    Every field tolerates being missing or null: title becomes "", lists
    become empty.
    """

    title: str = ""
    authors: list[str] = field(default_factory=list)
    subjects: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "OpenLibraryBook":
        if not isinstance(data, dict):
            return cls()
        return cls(
            title=_str_or_none(data.get("title")) or "",
            authors=_names(data.get("authors")),
            subjects=_names(data.get("subjects")),
        )


def build_cover_url(isbn: str, size: str = "L") -> str:
    """Build an Open Library cover image URL for a given ISBN.

    Args:
        isbn: The ISBN to look up cover art for.
        size: Image size - "S" (small), "M" (medium), or "L" (large).
    """
    return f"{_COVERS_BASE_URL}/{isbn}-{size}.jpg"


def parse_books_response(data: Any, isbn: str) -> LookupResult | None:
    """Parse a Books API response for a single ISBN bibkey.

    The response is keyed by "ISBN:<isbn>". Returns None when that key is
    absent or the entry has no title. The cover URL always points at the
    dedicated covers service, which serves larger images than the ones
    embedded in the response.
    """
    if not isinstance(data, dict):
        return None
    entry = data.get(f"ISBN:{isbn}")
    if entry is None:
        return None

    book = OpenLibraryBook.from_json(entry)
    if not book.title:
        return None

    return LookupResult(
        title=book.title,
        authors=book.authors,
        genre=map_category_to_genre(book.subjects[0] if book.subjects else None),
        cover_url=build_cover_url(isbn),
        isbn=isbn,
        source="openlibrary",
    )
