# ABOUTME: Composes filtering and sorting for the library and search views.
# ABOUTME: Also holds the debounced search session that feeds the search view.

from collections.abc import Sequence

from homelibrary.core.debounce import DEFAULT_DELAY_SECONDS, Debouncer
from homelibrary.library.filters import FilterState, matches
from homelibrary.library.sorting import SortOption, SortOrder, sort_books
from homelibrary.library.types import Book, PredefinedLocation


def search_view(
    books: Sequence[Book], locations: list[PredefinedLocation], query: str
) -> list[Book]:
    """Books matching a search query alone. A blank query matches nothing."""
    state = FilterState(search_query=query)
    if not state.has_search_query:
        return []
    return [book for book in books if matches(book, locations, state)]


def library_view(
    books: Sequence[Book],
    locations: list[PredefinedLocation],
    state: FilterState,
    *,
    search_text: str = "",
    sort_option: SortOption = SortOption.DATE_ADDED,
    sort_order: SortOrder = SortOrder.DESCENDING,
) -> list[Book]:
    """Filter then sort the collection for the library listing.

    search_text is merged into a copy of state for this call only; the
    stored filter state keeps whatever query it already had.
    """
    if search_text:
        effective = state.with_search(search_text)
        selected = [book for book in books if matches(book, locations, effective)]
    elif state.has_active_filters:
        selected = [book for book in books if matches(book, locations, state)]
    else:
        selected = list(books)
    return sort_books(selected, sort_option, sort_order, locations)


class SearchSession:
    """Search-as-you-type over a fixed collection.

    Keystrokes update `text` immediately; `active_query` only follows once
    typing has paused for the debounce delay. Clearing the text clears the
    active query at once.
    """

    def __init__(
        self,
        books: Sequence[Book],
        locations: list[PredefinedLocation],
        delay: float = DEFAULT_DELAY_SECONDS,
    ) -> None:
        self.books = books
        self.locations = locations
        self.text = ""
        self.active_query = ""
        self._debouncer: Debouncer[str] = Debouncer(self._commit, delay=delay)

    @property
    def results(self) -> list[Book]:
        return search_view(self.books, self.locations, self.active_query)

    def update_text(self, text: str) -> None:
        """Record a keystroke. Must be called from a running event loop."""
        self.text = text
        if not text:
            self._debouncer.cancel()
            self.active_query = ""
            return
        self._debouncer.submit(text)

    async def settle(self) -> None:
        """Wait until any pending query has been committed."""
        await self._debouncer.wait()

    def _commit(self, text: str) -> None:
        self.active_query = text
