# ABOUTME: Unit tests for FilterState and the matches predicate.
# ABOUTME: Covers active-filter accounting, toggles, search fields, and criterion independence.

from uuid import uuid4

import pytest

from homelibrary.library.filters import FilterState, matches
from homelibrary.library.types import Book, BookLocation, PredefinedLocation


@pytest.fixture
def shelf() -> PredefinedLocation:
    return PredefinedLocation(name="Hall")


@pytest.fixture
def dune(shelf: PredefinedLocation) -> Book:
    return Book(
        title="Dune",
        authors=["Frank Herbert"],
        genre="Science Fiction",
        isbn="9780441172719",
        location=BookLocation.predefined(shelf.id),
        tags=["classic", "Space Opera"],
        notes="First edition paperback",
        is_favorite=True,
    )


class TestActiveFilters:
    """Tests for has_active_filters and active_filter_count."""

    @pytest.mark.parametrize("query", ["", "dune", "   ", "Frank Herbert"])
    def test_search_query_alone_is_not_an_active_filter(self, query: str) -> None:
        """A state with only a search query has no active filters."""
        state = FilterState(search_query=query)
        assert state.has_active_filters is False
        assert state.active_filter_count == 0

    def test_count_sums_every_selection(self) -> None:
        """Each selected genre, location, and tag counts, plus one for favorites."""
        state = FilterState(
            genres=frozenset({"Fantasy", "Mystery"}),
            location_ids=frozenset({uuid4()}),
            tag_names=frozenset({"classic"}),
            favorites_only=True,
        )
        assert state.has_active_filters is True
        assert state.active_filter_count == 5

    def test_blank_query_is_not_a_search(self) -> None:
        """Whitespace-only search text does not count as a query."""
        assert FilterState(search_query="  ").has_search_query is False
        assert FilterState(search_query=" x ").has_search_query is True


class TestToggles:
    """Tests for the immutable toggle and clear helpers."""

    def test_toggle_genre_adds_then_removes(self) -> None:
        """Toggling a genre twice returns to the empty selection."""
        state = FilterState().toggle_genre("Fantasy")
        assert state.genres == {"Fantasy"}
        assert state.toggle_genre("Fantasy").genres == frozenset()

    def test_toggles_do_not_mutate_original(self) -> None:
        """Toggle helpers return new states."""
        original = FilterState()
        original.toggle_tag("classic")
        original.toggle_favorites()
        assert original == FilterState()

    def test_toggle_location(self) -> None:
        """Toggling a location id adds it to the selection."""
        location_id = uuid4()
        assert FilterState().toggle_location(location_id).location_ids == {location_id}

    def test_clear_keeps_search_query(self) -> None:
        """clear() drops structured filters but keeps the query."""
        state = FilterState(genres=frozenset({"Fantasy"}), favorites_only=True, search_query="hob")
        cleared = state.clear()
        assert cleared.has_active_filters is False
        assert cleared.search_query == "hob"

    def test_clear_all_resets_everything(self) -> None:
        """clear_all() drops the query too."""
        state = FilterState(tag_names=frozenset({"x"}), search_query="hob")
        assert state.clear_all() == FilterState()


class TestSearchMatching:
    """Tests for free-text matching."""

    @pytest.mark.parametrize(
        "query",
        ["dune", "DUNE", "herbert", "paperback", "space opera", "9780441", "  dune  "],
    )
    def test_query_matches_searchable_fields(
        self, dune: Book, shelf: PredefinedLocation, query: str
    ) -> None:
        """Title, authors, notes, tags, and ISBN are searched case-insensitively."""
        assert matches(dune, [shelf], FilterState(search_query=query))

    def test_genre_is_not_searched(self, dune: Book, shelf: PredefinedLocation) -> None:
        """The genre field is only reachable through the genre filter."""
        assert not matches(dune, [shelf], FilterState(search_query="science fiction"))

    def test_isbn_with_letter_needs_lowercase_match(self) -> None:
        """ISBNs are compared as stored against the lowercased query."""
        book = Book(title="Old", isbn="080442957X")
        assert not matches(book, [], FilterState(search_query="080442957X"))
        assert matches(book, [], FilterState(search_query="080442957"))

    def test_book_without_optional_fields(self) -> None:
        """Missing notes and ISBN simply don't match."""
        book = Book(title="Bare")
        assert not matches(book, [], FilterState(search_query="note"))


class TestStructuredMatching:
    """Tests for genre, location, tag, and favorite criteria."""

    def test_no_criteria_matches_everything(self, dune: Book) -> None:
        """An empty filter state matches any book."""
        assert matches(dune, [], FilterState())
        assert matches(Book(title="x"), [], FilterState())

    def test_all_criteria_passing(self, dune: Book, shelf: PredefinedLocation) -> None:
        """A book meeting every criterion matches."""
        state = FilterState(
            genres=frozenset({"Science Fiction"}),
            location_ids=frozenset({shelf.id}),
            tag_names=frozenset({"classic", "unrelated"}),
            favorites_only=True,
            search_query="dune",
        )
        assert matches(dune, [shelf], state)

    @pytest.mark.parametrize(
        "failing",
        [
            {"genres": frozenset({"Fantasy"})},
            {"location_ids": frozenset({uuid4()})},
            {"tag_names": frozenset({"unrelated"})},
            {"search_query": "tolkien"},
        ],
    )
    def test_one_failing_criterion_rejects(
        self, dune: Book, shelf: PredefinedLocation, failing: dict
    ) -> None:
        """Any single failing criterion rejects the book even when the rest pass."""
        passing = {
            "genres": frozenset({"Science Fiction"}),
            "location_ids": frozenset({shelf.id}),
            "tag_names": frozenset({"classic"}),
            "favorites_only": True,
            "search_query": "dune",
        }
        state = FilterState(**{**passing, **failing})
        assert not matches(dune, [shelf], state)

    def test_favorites_only_rejects_non_favorites(self, dune: Book, shelf: PredefinedLocation) -> None:
        """favorites_only rejects a book that is not a favorite."""
        dune.is_favorite = False
        state = FilterState(genres=frozenset({"Science Fiction"}), favorites_only=True)
        assert not matches(dune, [shelf], state)

    def test_book_without_genre_fails_genre_filter(self) -> None:
        """A book with no genre never passes a genre filter."""
        assert not matches(Book(title="x"), [], FilterState(genres=frozenset({"Fantasy"})))

    def test_custom_location_fails_location_filter(self, shelf: PredefinedLocation) -> None:
        """Location filters only match predefined locations."""
        book = Book(title="x", location=BookLocation.custom("Hall"))
        assert not matches(book, [shelf], FilterState(location_ids=frozenset({shelf.id})))

    def test_tag_filter_needs_any_overlap(self, dune: Book) -> None:
        """A book passes the tag filter if it carries any selected tag."""
        assert matches(dune, [], FilterState(tag_names=frozenset({"Space Opera", "nope"})))
        assert not matches(dune, [], FilterState(tag_names=frozenset({"space opera"})))
