# ABOUTME: Helpers shared by commands: opening the catalog and resolving books by id prefix.
# ABOUTME: Guarantees the SQLite connection is closed however a command exits.

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console

from homelibrary.db.catalog import LibraryCatalog
from homelibrary.db.connection import DEFAULT_DB_PATH, open_library
from homelibrary.errors import StorageError
from homelibrary.library.types import Book

console = Console()


@contextmanager
def open_catalog(db_path: Path | None) -> Iterator[LibraryCatalog]:
    """Open the library database and yield a catalog, closing it on exit."""
    try:
        conn = open_library(db_path or DEFAULT_DB_PATH)
    except StorageError as exc:
        console.print(f"[red]{exc}.[/red]")
        raise SystemExit(1) from exc
    try:
        yield LibraryCatalog(conn)
    finally:
        conn.close()


def require_book(catalog: LibraryCatalog, book_id: str, console: Console) -> Book:
    """Resolve a book id prefix or exit with an error message."""
    try:
        return catalog.find_book(book_id)
    except ValueError as exc:
        console.print(f"[red]{exc}.[/red]")
        raise SystemExit(1) from exc
