# ABOUTME: CRUD operations for the Home Library catalog: books, locations, tags, settings.
# ABOUTME: The storage layer behind the CLI; callers re-sort results rather than rely on order.

import sqlite3
from typing import Any
from uuid import UUID

from homelibrary.db.mapping import (
    book_to_row,
    location_to_row,
    row_to_book,
    row_to_location,
    row_to_settings,
    row_to_tag,
    settings_to_row,
    tag_to_row,
)
from homelibrary.library.settings import SETTINGS_ID, AppSettings
from homelibrary.library.tags import UserTag
from homelibrary.library.types import Book, PredefinedLocation


class LibraryCatalog:
    """Wraps a sqlite3 connection and provides typed CRUD for every record table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _insert(self, table: str, row: dict[str, Any]) -> None:
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        self._conn.execute(
            f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        self._conn.commit()

    def _update(self, table: str, row: dict[str, Any], label: str) -> None:
        record_id = row.pop("id")
        set_clause = ", ".join(f"{k} = ?" for k in row)
        cursor = self._conn.execute(
            f"UPDATE {table} SET {set_clause} WHERE id = ?",
            [*row.values(), record_id],
        )
        self._conn.commit()
        if cursor.rowcount == 0:
            raise ValueError(f"{label} with id {record_id} not found")

    def _delete(self, table: str, record_id: UUID, label: str) -> None:
        cursor = self._conn.execute(f"DELETE FROM {table} WHERE id = ?", (str(record_id),))
        self._conn.commit()
        if cursor.rowcount == 0:
            raise ValueError(f"{label} with id {record_id} not found")

    # --- Books ---

    def insert_book(self, book: Book) -> None:
        """Add a book to the catalog."""
        self._insert("books", book_to_row(book))

    def update_book(self, book: Book) -> None:
        """Write every field of an existing book.

        Raises:
            ValueError: If the book does not exist.
        """
        self._update("books", book_to_row(book), "Book")

    def delete_book(self, book: Book) -> None:
        """Delete a book from the catalog. Irreversible.

        Raises:
            ValueError: If the book does not exist.
        """
        self._delete("books", book.id, "Book")

    def get_book(self, book_id: UUID) -> Book | None:
        """Retrieve a book by its id."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (str(book_id),))
        row = cursor.fetchone()
        return row_to_book(row) if row else None

    def find_book(self, id_prefix: str) -> Book:
        """Retrieve a book by a unique prefix of its id, as shown in listings.

        Raises:
            ValueError: If no book or more than one book matches.
        """
        prefix = id_prefix.strip().lower()
        if not prefix:
            raise ValueError("Book id is required")
        cursor = self._conn.execute(
            "SELECT * FROM books WHERE id LIKE ? LIMIT 2", (f"{prefix}%",)
        )
        rows = cursor.fetchall()
        if not rows:
            raise ValueError(f"Book {id_prefix} not found")
        if len(rows) > 1:
            raise ValueError(f"Book id {id_prefix} is ambiguous")
        return row_to_book(rows[0])

    def list_books(self) -> list[Book]:
        """Return all books, most recently added first."""
        cursor = self._conn.execute("SELECT * FROM books ORDER BY date_added DESC")
        return [row_to_book(row) for row in cursor.fetchall()]

    # --- Locations ---

    def insert_location(self, location: PredefinedLocation) -> None:
        self._insert("locations", location_to_row(location))

    def update_location(self, location: PredefinedLocation) -> None:
        self._update("locations", location_to_row(location), "Location")

    def delete_location(self, location: PredefinedLocation) -> None:
        """Delete a location. Books that referenced it show "Unknown Location"."""
        self._delete("locations", location.id, "Location")

    def list_locations(self) -> list[PredefinedLocation]:
        """Return all predefined locations, ordered by name."""
        cursor = self._conn.execute("SELECT * FROM locations ORDER BY name")
        return [row_to_location(row) for row in cursor.fetchall()]

    def get_location_by_name(self, name: str) -> PredefinedLocation | None:
        cursor = self._conn.execute(
            "SELECT * FROM locations WHERE name = ? COLLATE NOCASE LIMIT 1", (name,)
        )
        row = cursor.fetchone()
        return row_to_location(row) if row else None

    # --- Tags ---

    def insert_tag(self, tag: UserTag) -> None:
        self._insert("tags", tag_to_row(tag))

    def update_tag(self, tag: UserTag) -> None:
        """Write a tag back. A rename does not update books that carry the old name."""
        self._update("tags", tag_to_row(tag), "Tag")

    def delete_tag(self, tag: UserTag) -> None:
        """Delete a tag. Books keep the tag name in their own tag lists."""
        self._delete("tags", tag.id, "Tag")

    def list_tags(self) -> list[UserTag]:
        """Return all tags, ordered by name."""
        cursor = self._conn.execute("SELECT * FROM tags ORDER BY name")
        return [row_to_tag(row) for row in cursor.fetchall()]

    def get_tag_by_name(self, name: str) -> UserTag | None:
        cursor = self._conn.execute("SELECT * FROM tags WHERE name = ? LIMIT 1", (name,))
        row = cursor.fetchone()
        return row_to_tag(row) if row else None

    def count_tags(self) -> int:
        cursor = self._conn.execute("SELECT COUNT(*) FROM tags")
        return cursor.fetchone()[0]

    # --- Settings ---

    def load_settings(self) -> AppSettings:
        """Return stored settings, or defaults if none have been saved yet."""
        cursor = self._conn.execute("SELECT * FROM settings WHERE id = ?", (SETTINGS_ID,))
        row = cursor.fetchone()
        return row_to_settings(row) if row else AppSettings()

    def save_settings(self, settings: AppSettings) -> None:
        """Persist settings, creating the single settings row on first write."""
        row = settings_to_row(settings)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        self._conn.execute(
            f"INSERT OR REPLACE INTO settings ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        self._conn.commit()
