# ABOUTME: Shared pytest fixtures for Home Library tests.
# ABOUTME: Provides a temporary catalog database and sample book records.

import sqlite3
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from homelibrary.db.catalog import LibraryCatalog
from homelibrary.db.connection import open_library
from homelibrary.library.types import Book, BookLocation, PredefinedLocation

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a fresh library database."""
    return tmp_path / "library.db"


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """Open connection to a fresh library database."""
    connection = open_library(db_path)
    yield connection
    connection.close()


@pytest.fixture
def catalog(conn: sqlite3.Connection) -> LibraryCatalog:
    return LibraryCatalog(conn)


@pytest.fixture
def shelf() -> PredefinedLocation:
    return PredefinedLocation(name="Living Room - Shelf A")


@pytest.fixture
def sample_books(shelf: PredefinedLocation) -> list[Book]:
    """Four books added an hour apart, oldest first."""
    return [
        Book(
            title="Dune",
            authors=["Frank Herbert"],
            genre="Science Fiction",
            isbn="9780441172719",
            location=BookLocation.predefined(shelf.id),
            tags=["classic", "space"],
            is_favorite=True,
            date_added=BASE_TIME,
        ),
        Book(
            title="The Hobbit",
            authors=["J.R.R. Tolkien"],
            genre="Fantasy",
            location=BookLocation.custom("Bedroom nightstand"),
            tags=["classic"],
            notes="Gift from grandma",
            date_added=BASE_TIME + timedelta(hours=1),
        ),
        Book(
            title="Effective Java",
            authors=["Joshua Bloch"],
            genre="Other",
            isbn="9780134685991",
            date_added=BASE_TIME + timedelta(hours=2),
        ),
        Book(
            title="anathem",
            authors=["Neal Stephenson"],
            genre="Science Fiction",
            location=BookLocation.predefined(shelf.id),
            tags=["space"],
            is_favorite=True,
            date_added=BASE_TIME + timedelta(hours=3),
        ),
    ]
