# ABOUTME: Duplicate detection used before adding a book to the library.
# ABOUTME: Matches on normalized title plus at least one shared author; advisory only.

from collections.abc import Iterable

from homelibrary.library.types import Book


def normalize_title(title: str) -> str:
    return title.strip().lower()


def find_duplicate(
    title: str, authors: list[str], existing: Iterable[Book]
) -> Book | None:
    """Find an existing book that looks like the same title by the same author.

    A book matches when its trimmed, lowercased title equals the candidate's
    and the lowercased author sets share at least one name. The first match
    in iteration order is returned. A candidate with no authors never matches.
    """
    wanted_title = normalize_title(title)
    wanted_authors = {author.lower() for author in authors}

    for book in existing:
        if normalize_title(book.title) != wanted_title:
            continue
        if not wanted_authors.isdisjoint(author.lower() for author in book.authors):
            return book
    return None
