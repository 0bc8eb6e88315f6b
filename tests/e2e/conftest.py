# ABOUTME: Fixtures for CLI end-to-end tests.
# ABOUTME: Routes metadata lookups to a fake transport and gives each test its own database.

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
from click.testing import CliRunner, Result

from homelibrary.cli import cli, fetch
from homelibrary.db.catalog import LibraryCatalog
from homelibrary.db.connection import open_library
from homelibrary.library.types import Book
from homelibrary.metadata.http import LibraryHttpClient
from tests.fixtures.fake_http import FakeTransport
from tests.fixtures.googlebooks_responses import VOLUMES_RESPONSE_EMPTY
from tests.fixtures.openlibrary_responses import (
    BOOKS_RESPONSE_EMPTY,
    DUNE_ISBN,
    DUNE_RESPONSE,
)

COVER_BYTES = b"\xff\xd8\xff\xe0cover"


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> FakeTransport:
    """Fake transport that knows Dune and nothing else."""
    fake = FakeTransport(
        {
            "covers.openlibrary.org": httpx.Response(200, content=COVER_BYTES),
            DUNE_ISBN: httpx.Response(200, json=DUNE_RESPONSE),
            "openlibrary.org/api/books": httpx.Response(200, json=BOOKS_RESPONSE_EMPTY),
            "googleapis.com": httpx.Response(200, json=VOLUMES_RESPONSE_EMPTY),
        }
    )
    monkeypatch.setattr(
        fetch,
        "create_http_client",
        lambda: LibraryHttpClient(min_request_interval=0.0, transport=fake),
    )
    return fake


@pytest.fixture
def run(db_path: Path) -> Callable[..., Result]:
    """Invoke the CLI against the test database."""
    runner = CliRunner()

    def invoke(*args: str, input: str | None = None) -> Result:
        return runner.invoke(cli, [*args, "--db", str(db_path)], input=input)

    return invoke


@pytest.fixture
def stored_books(db_path: Path) -> Callable[[], list[Book]]:
    """Read the books currently in the test database."""

    def read() -> list[Book]:
        conn = open_library(db_path)
        try:
            return LibraryCatalog(conn).list_books()
        finally:
            conn.close()

    return read
