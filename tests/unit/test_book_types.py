# ABOUTME: Unit tests for the core record types: Book, BookLocation, and covers.
# ABOUTME: Covers author display fallbacks, location labels, cover variants, and modification stamps.

from datetime import timedelta
from uuid import uuid4

from homelibrary.library.types import (
    UNKNOWN_AUTHOR,
    UNKNOWN_LOCATION,
    Book,
    BookLocation,
    CoverBlob,
    CoverURL,
    LocationKind,
    NoCover,
    PredefinedLocation,
)


class TestAuthorsDisplay:
    """Tests for Book.authors_display and Book.has_authors."""

    def test_empty_authors_shows_unknown_author(self) -> None:
        """A book with no authors displays "Unknown Author" and has no authors."""
        book = Book(title="Anonymous Pamphlet", authors=[])
        assert book.authors_display == UNKNOWN_AUTHOR == "Unknown Author"
        assert book.has_authors is False

    def test_multiple_authors_joined_with_comma(self) -> None:
        """Multiple authors are joined with ", "."""
        book = Book(title="Good Omens", authors=["Terry Pratchett", "Neil Gaiman"])
        assert book.authors_display == "Terry Pratchett, Neil Gaiman"
        assert book.has_authors is True

    def test_blank_first_author_counts_as_no_authors(self) -> None:
        """A leading empty author string means the book has no real authors."""
        book = Book(title="Draft", authors=[""])
        assert book.has_authors is False


class TestBookLocation:
    """Tests for BookLocation display resolution."""

    def test_predefined_resolves_to_location_name(self) -> None:
        """A predefined reference shows the saved location's name."""
        shelf = PredefinedLocation(name="Study - Top Shelf")
        location = BookLocation.predefined(shelf.id)
        assert location.kind is LocationKind.PREDEFINED
        assert location.display_text([shelf]) == "Study - Top Shelf"

    def test_dangling_predefined_shows_unknown_location(self) -> None:
        """A reference to a deleted location shows "Unknown Location"."""
        location = BookLocation.predefined(uuid4())
        assert location.display_text([PredefinedLocation(name="Other")]) == UNKNOWN_LOCATION

    def test_custom_shows_its_text(self) -> None:
        """A custom location shows its free text."""
        assert BookLocation.custom("Car trunk").display_text([]) == "Car trunk"

    def test_book_without_location_has_no_display(self) -> None:
        """location_display is None when the book has no location."""
        assert Book(title="Loose").location_display([]) is None


class TestCover:
    """Tests for the cover variant accessors."""

    def test_no_cover(self) -> None:
        """NoCover exposes neither URL nor bytes."""
        book = Book(title="Plain", cover=NoCover())
        assert book.cover_url is None
        assert book.cover_data is None

    def test_url_cover(self) -> None:
        """A URL cover exposes only the URL."""
        book = Book(title="Remote", cover=CoverURL(url="https://example.com/c.jpg"))
        assert book.cover_url == "https://example.com/c.jpg"
        assert book.cover_data is None

    def test_blob_cover_keeps_source_url(self) -> None:
        """A blob cover exposes its bytes and the URL it came from."""
        book = Book(title="Local", cover=CoverBlob(data=b"\xff\xd8", url="https://example.com/c.jpg"))
        assert book.cover_data == b"\xff\xd8"
        assert book.cover_url == "https://example.com/c.jpg"


class TestModification:
    """Tests for in-place modification helpers."""

    def test_toggle_favorite_flips_and_touches(self) -> None:
        """Toggling favorite flips the flag and advances last_modified."""
        book = Book(title="Dune")
        book.last_modified = book.last_modified - timedelta(days=1)
        before = book.last_modified

        book.toggle_favorite()
        assert book.is_favorite is True
        assert book.last_modified > before

        book.toggle_favorite()
        assert book.is_favorite is False

    def test_new_books_get_distinct_ids(self) -> None:
        """Each new book gets its own identifier."""
        assert Book(title="A").id != Book(title="A").id
