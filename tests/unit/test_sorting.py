# ABOUTME: Unit tests for sort_books and the sort option enums.
# ABOUTME: Covers every sort key, direction reversal, and the handling of missing values.

from datetime import timedelta

from homelibrary.library.sorting import SortOption, SortOrder, sort_books
from homelibrary.library.types import Book, BookLocation, PredefinedLocation
from tests.conftest import BASE_TIME


def _titles(books: list[Book]) -> list[str]:
    return [book.title for book in books]


class TestSortOrder:
    """Tests for SortOrder."""

    def test_toggled(self) -> None:
        """toggled() flips the direction."""
        assert SortOrder.ASCENDING.toggled() is SortOrder.DESCENDING
        assert SortOrder.DESCENDING.toggled() is SortOrder.ASCENDING


class TestSortByTitle:
    """Tests for title sorting."""

    def test_case_insensitive_ascending(self) -> None:
        """Titles compare without regard to case."""
        books = [Book(title="banana"), Book(title="Apple"), Book(title="cherry")]
        result = sort_books(books, SortOption.TITLE, SortOrder.ASCENDING, [])
        assert _titles(result) == ["Apple", "banana", "cherry"]

    def test_descending_is_exact_reverse(self) -> None:
        """With distinct titles, descending is the ascending order reversed."""
        books = [Book(title=t) for t in ["Moby Dick", "Anathem", "zen", "Dune", "emma", "Beloved"]]
        ascending = sort_books(books, SortOption.TITLE, SortOrder.ASCENDING, [])
        descending = sort_books(books, SortOption.TITLE, SortOrder.DESCENDING, [])
        assert descending == list(reversed(ascending))

    def test_input_is_not_modified(self) -> None:
        """sort_books returns a new list."""
        books = [Book(title="b"), Book(title="a")]
        sort_books(books, SortOption.TITLE, SortOrder.ASCENDING, [])
        assert _titles(books) == ["b", "a"]


class TestSortByDateAdded:
    """Tests for date-added sorting."""

    def test_descending_puts_newest_first(self) -> None:
        """The default library order shows the most recently added book first."""
        old = Book(title="Old", date_added=BASE_TIME)
        new = Book(title="New", date_added=BASE_TIME + timedelta(days=3))
        mid = Book(title="Mid", date_added=BASE_TIME + timedelta(days=1))
        result = sort_books([old, new, mid], SortOption.DATE_ADDED, SortOrder.DESCENDING, [])
        assert _titles(result) == ["New", "Mid", "Old"]

    def test_ascending_puts_oldest_first(self) -> None:
        """Ascending date order shows the oldest book first."""
        old = Book(title="Old", date_added=BASE_TIME)
        new = Book(title="New", date_added=BASE_TIME + timedelta(days=3))
        result = sort_books([new, old], SortOption.DATE_ADDED, SortOrder.ASCENDING, [])
        assert _titles(result) == ["Old", "New"]


class TestSortByOtherKeys:
    """Tests for author, genre, location, and favorites sorting."""

    def test_author_uses_first_author(self) -> None:
        """Books sort by their first author; no author sorts as empty text."""
        books = [
            Book(title="B", authors=["Zadie Smith", "Aaron A"]),
            Book(title="A", authors=["Margaret Atwood"]),
            Book(title="None", authors=[]),
        ]
        result = sort_books(books, SortOption.AUTHOR, SortOrder.ASCENDING, [])
        assert _titles(result) == ["None", "A", "B"]

    def test_genre_missing_sorts_first(self) -> None:
        """Books without a genre sort before any genre in ascending order."""
        books = [Book(title="F", genre="Fantasy"), Book(title="N"), Book(title="B", genre="biography")]
        result = sort_books(books, SortOption.GENRE, SortOrder.ASCENDING, [])
        assert _titles(result) == ["N", "B", "F"]

    def test_location_uses_display_text(self) -> None:
        """Predefined locations sort by name, custom ones by text, missing as empty."""
        attic = PredefinedLocation(name="Attic")
        books = [
            Book(title="Custom", location=BookLocation.custom("Garage")),
            Book(title="Nowhere"),
            Book(title="Saved", location=BookLocation.predefined(attic.id)),
        ]
        result = sort_books(books, SortOption.LOCATION, SortOrder.ASCENDING, [attic])
        assert _titles(result) == ["Nowhere", "Saved", "Custom"]

    def test_favorites_first_when_ascending(self) -> None:
        """Ascending favorites order puts favorites first, keeping input order within groups."""
        books = [
            Book(title="a"),
            Book(title="b", is_favorite=True),
            Book(title="c"),
            Book(title="d", is_favorite=True),
        ]
        result = sort_books(books, SortOption.FAVORITES, SortOrder.ASCENDING, [])
        assert _titles(result) == ["b", "d", "a", "c"]

    def test_favorites_descending_reverses_whole_sequence(self) -> None:
        """Descending reverses the ascending result, ties included."""
        books = [
            Book(title="a"),
            Book(title="b", is_favorite=True),
            Book(title="c"),
            Book(title="d", is_favorite=True),
        ]
        result = sort_books(books, SortOption.FAVORITES, SortOrder.DESCENDING, [])
        assert _titles(result) == ["c", "a", "d", "b"]


class TestAccentedText:
    """Tests for text keys containing accented characters."""

    def test_accented_title_sorts_with_its_base_letter(self) -> None:
        """An accented initial sorts beside the unaccented letter, not after Z."""
        books = [Book(title="Zebra"), Book(title="Émile"), Book(title="apple")]
        result = sort_books(books, SortOption.TITLE, SortOrder.ASCENDING, [])
        assert _titles(result) == ["apple", "Émile", "Zebra"]

    def test_unaccented_form_breaks_ties(self) -> None:
        """Titles equal apart from accents put the plain form first."""
        books = [Book(title="Émile"), Book(title="Emile")]
        result = sort_books(books, SortOption.TITLE, SortOrder.ASCENDING, [])
        assert _titles(result) == ["Emile", "Émile"]

    def test_accented_author(self) -> None:
        """First authors with accents collate by their base letters."""
        books = [
            Book(title="O", authors=["Ögmundur Jónsson"]),
            Book(title="N", authors=["Nadia Hashimi"]),
            Book(title="A", authors=["Anaïs Nin"]),
        ]
        result = sort_books(books, SortOption.AUTHOR, SortOrder.ASCENDING, [])
        assert _titles(result) == ["A", "N", "O"]

    def test_accented_genre_and_location(self) -> None:
        """Genre and location text collate the same way."""
        books = [
            Book(title="F", genre="Fantasy", location=BookLocation.custom("Garage")),
            Book(title="E", genre="Ésotérisme", location=BookLocation.custom("Étagère")),
            Book(title="D", genre="Drama", location=BookLocation.custom("Den")),
        ]
        by_genre = sort_books(books, SortOption.GENRE, SortOrder.ASCENDING, [])
        by_location = sort_books(books, SortOption.LOCATION, SortOrder.ASCENDING, [])
        assert _titles(by_genre) == ["D", "E", "F"]
        assert _titles(by_location) == ["D", "E", "F"]
