# ABOUTME: Public API for the Home Library database layer.
# ABOUTME: Exports connection management and catalog operations.

from homelibrary.db.catalog import LibraryCatalog
from homelibrary.db.connection import DEFAULT_DB_PATH, open_library

__all__ = [
    "DEFAULT_DB_PATH",
    "LibraryCatalog",
    "open_library",
]
