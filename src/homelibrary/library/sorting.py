# ABOUTME: Sort options for the library and the multi-key sort used to order books.
# ABOUTME: Text keys compare locale-aware and case-insensitively; sorting is stable.

import locale
import unicodedata
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from homelibrary.library.types import Book, PredefinedLocation


class SortOption(str, Enum):
    DATE_ADDED = "Date Added"
    TITLE = "Title"
    AUTHOR = "Author"
    GENRE = "Genre"
    LOCATION = "Location"
    FAVORITES = "Favorites"


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def toggled(self) -> "SortOrder":
        if self is SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


def text_key(text: str) -> tuple[str, str]:
    """Collation key for locale-aware, case-insensitive comparison.

    The primary key ignores accents so "Émile" sorts among the E's even
    under the C locale; the accented form breaks ties.
    """
    folded = text.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return locale.strxfrm(base), locale.strxfrm(folded)


def _location_text(book: Book, locations: list[PredefinedLocation]) -> str:
    # Books with no location at all sort as empty text.
    if book.location is None:
        return ""
    return book.location.display_text(locations)


def _key_for(
    option: SortOption, locations: list[PredefinedLocation]
) -> Callable[[Book], Any]:
    if option is SortOption.DATE_ADDED:
        return lambda book: book.date_added
    if option is SortOption.TITLE:
        return lambda book: text_key(book.title)
    if option is SortOption.AUTHOR:
        return lambda book: text_key(book.authors[0] if book.authors else "")
    if option is SortOption.GENRE:
        return lambda book: text_key(book.genre or "")
    if option is SortOption.LOCATION:
        return lambda book: text_key(_location_text(book, locations))
    # Favorites first: False sorts before True, so key on "not favorite".
    return lambda book: not book.is_favorite


def sort_books(
    books: Iterable[Book],
    option: SortOption,
    order: SortOrder,
    locations: list[PredefinedLocation],
) -> list[Book]:
    """Order books by a sort option.

    The ascending order is computed with a stable sort. Descending reverses
    that sequence as a whole, so ties come out in reverse input order
    rather than input order.
    """
    ordered = sorted(books, key=_key_for(option, locations))
    if order is SortOrder.DESCENDING:
        ordered.reverse()
    return ordered
