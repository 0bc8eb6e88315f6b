# ABOUTME: Record model and the in-memory engines that operate on the book collection.
# ABOUTME: Exports books, locations, tags, filter state, sorting, and duplicate detection.

from homelibrary.library.duplicates import find_duplicate
from homelibrary.library.filters import FilterState, matches
from homelibrary.library.form import BookFormData, LocationChoice
from homelibrary.library.settings import AppSettings
from homelibrary.library.sorting import SortOption, SortOrder, sort_books
from homelibrary.library.tags import TagColorRotation, UserTag, create_tag
from homelibrary.library.types import (
    GENRES,
    Book,
    BookLocation,
    Cover,
    CoverBlob,
    CoverURL,
    NoCover,
    PredefinedLocation,
    SyncStatus,
)

__all__ = [
    "GENRES",
    "AppSettings",
    "Book",
    "BookFormData",
    "BookLocation",
    "Cover",
    "CoverBlob",
    "CoverURL",
    "FilterState",
    "LocationChoice",
    "NoCover",
    "PredefinedLocation",
    "SortOption",
    "SortOrder",
    "SyncStatus",
    "TagColorRotation",
    "UserTag",
    "create_tag",
    "find_duplicate",
    "matches",
    "sort_books",
]
