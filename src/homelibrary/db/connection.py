# ABOUTME: Opens the Home Library SQLite file, creating it and its schema on first use.
# ABOUTME: Refuses files written by a newer schema so an old install can't corrupt them.

import logging
import sqlite3
from pathlib import Path

from homelibrary.db.schema import SCHEMA_V1, SCHEMA_VERSION
from homelibrary.errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".homelibrary" / "library.db"


def _is_initialized(conn: sqlite3.Connection) -> bool:
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name='schema_version'"
    ).fetchone()
    return row is not None


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Highest schema version recorded in the file, or 0 for an empty file."""
    row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    return row[0] or 0


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open the library database, creating it if needed.

    Parent directories are created as required. A new file gets the full
    schema; an existing one is checked against SCHEMA_VERSION. Rows come
    back as sqlite3.Row and the journal runs in WAL mode.

    Args:
        path: Database file. Defaults to ~/.homelibrary/library.db.

    Returns:
        An open connection. The caller closes it.

    Raises:
        StorageError: If the file was written by a newer schema version.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _is_initialized(conn):
        logger.info("Creating library database at %s", db_path)
        conn.executescript(SCHEMA_V1)
        return conn

    version = get_schema_version(conn)
    if version > SCHEMA_VERSION:
        conn.close()
        raise StorageError(
            f"{db_path} uses schema version {version}; this version of homelib "
            f"understands up to {SCHEMA_VERSION}"
        )
    logger.debug("Opened %s at schema version %d", db_path, version)
    return conn
