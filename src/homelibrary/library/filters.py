# ABOUTME: FilterState value type and the book-matching predicate.
# ABOUTME: Search text and structured filters (genre, location, tag, favorite) compose here.

from dataclasses import dataclass, field, replace
from uuid import UUID

from homelibrary.library.types import Book, LocationKind, PredefinedLocation


def _toggled(values: frozenset, value: object) -> frozenset:
    return values - {value} if value in values else values | {value}


@dataclass(frozen=True)
class FilterState:
    """Current filter selection for the library.

    Structured filters are the genre, location and tag sets plus the
    favorites flag. The search query is tracked alongside them but never
    counts as an active filter.
    """

    genres: frozenset[str] = field(default_factory=frozenset)
    location_ids: frozenset[UUID] = field(default_factory=frozenset)
    tag_names: frozenset[str] = field(default_factory=frozenset)
    favorites_only: bool = False
    search_query: str = ""

    @property
    def has_active_filters(self) -> bool:
        return bool(self.genres or self.location_ids or self.tag_names or self.favorites_only)

    @property
    def active_filter_count(self) -> int:
        return (
            len(self.genres)
            + len(self.location_ids)
            + len(self.tag_names)
            + (1 if self.favorites_only else 0)
        )

    @property
    def has_search_query(self) -> bool:
        return bool(self.search_query.strip())

    def clear(self) -> "FilterState":
        """Drop structured filters, keeping the search query."""
        return FilterState(search_query=self.search_query)

    def clear_all(self) -> "FilterState":
        return FilterState()

    def with_search(self, query: str) -> "FilterState":
        return replace(self, search_query=query)

    def toggle_genre(self, genre: str) -> "FilterState":
        return replace(self, genres=_toggled(self.genres, genre))

    def toggle_location(self, location_id: UUID) -> "FilterState":
        return replace(self, location_ids=_toggled(self.location_ids, location_id))

    def toggle_tag(self, tag_name: str) -> "FilterState":
        return replace(self, tag_names=_toggled(self.tag_names, tag_name))

    def toggle_favorites(self) -> "FilterState":
        return replace(self, favorites_only=not self.favorites_only)


def _matches_query(book: Book, query: str) -> bool:
    if query in book.title.lower():
        return True
    if any(query in author.lower() for author in book.authors):
        return True
    if book.notes is not None and query in book.notes.lower():
        return True
    if any(query in tag.lower() for tag in book.tags):
        return True
    return book.isbn is not None and query in book.isbn


def matches(
    book: Book, locations: list[PredefinedLocation], state: FilterState
) -> bool:
    """Return True if the book passes every active criterion in state.

    Criteria are checked in order (search text, genre, location, tags,
    favorites) and evaluation stops at the first one that fails. Text
    matching is case-insensitive; set membership is exact.

    locations is accepted so every call site has the same shape; location
    filtering compares ids and does not need to resolve names.
    """
    if state.has_search_query:
        query = state.search_query.strip().lower()
        if not _matches_query(book, query):
            return False

    if state.genres and (book.genre is None or book.genre not in state.genres):
        return False

    if state.location_ids:
        location = book.location
        if (
            location is None
            or location.kind is not LocationKind.PREDEFINED
            or location.predefined_id not in state.location_ids
        ):
            return False

    if state.tag_names and state.tag_names.isdisjoint(book.tags):
        return False

    return not (state.favorites_only and not book.is_favorite)
