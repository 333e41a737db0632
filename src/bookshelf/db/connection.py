# ABOUTME: SQLite connection management for the Bookshelf catalog.
# ABOUTME: Opens or creates the database and applies the schema on first use.

import sqlite3
from pathlib import Path

from bookshelf.config import DEFAULT_DB_PATH
from bookshelf.db.schema import SCHEMA_V1


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def get_schema_version(conn: sqlite3.Connection) -> int:
    """Read the current schema version from the database."""
    cursor = conn.execute("SELECT version FROM schema_version ORDER BY version DESC LIMIT 1")
    row = cursor.fetchone()
    return row[0] if row else 0


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Bookshelf catalog database.

    Creates the database file and parent directories if they don't exist and
    applies the schema on first creation. The connection may be used from
    several threads (the web server runs handlers in a pool), so callers must
    serialize access themselves; EntryStore does this with a lock.

    Args:
        path: Path to the database file. Defaults to DEFAULT_DB_PATH.

    Returns:
        A configured sqlite3.Connection with sqlite3.Row rows.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    return conn
