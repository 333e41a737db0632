# ABOUTME: CRUD operations for the Bookshelf catalog entries table.
# ABOUTME: List, create, find, and delete entries; wraps SQLite and binding failures in StoreError.

import sqlite3
import threading

from bookshelf.db.mapping import CatalogEntry, row_to_entry


class StoreError(Exception):
    """Raised when the underlying database operation fails."""


class EntryNotFoundError(Exception):
    """Raised when deleting an entry id that does not exist."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"Entry with id {entry_id} not found")
        self.entry_id = entry_id


class EntryStore:
    """Wraps a sqlite3 connection and provides typed CRUD for the entries table.

    A single connection is shared between request threads, so every operation
    runs under a lock. No operation spans more than one row.

    Integers outside SQLite's 64-bit range make sqlite3 raise OverflowError
    while binding parameters; that is reported as StoreError too.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.Lock()

    def list_entries(self) -> list[CatalogEntry]:
        """Return all entries, ordered by id."""
        with self._lock:
            try:
                cursor = self._conn.execute("SELECT * FROM entries ORDER BY id")
                rows = cursor.fetchall()
            except (sqlite3.Error, OverflowError) as exc:
                raise StoreError(f"Failed to list entries: {exc}") from exc
        return [row_to_entry(row) for row in rows]

    def create(
        self,
        title: str,
        author: str,
        first_publish_year: int | None = None,
        edition_count: int | None = None,
    ) -> CatalogEntry:
        """Insert a new entry and return it with its assigned id.

        Values are stored as given; checking that title and author are
        present is left to the caller.
        """
        with self._lock:
            try:
                cursor = self._conn.execute(
                    "INSERT INTO entries (title, author, first_publish_year, edition_count) "
                    "VALUES (?, ?, ?, ?)",
                    (title, author, first_publish_year, edition_count),
                )
                self._conn.commit()
                row = self._conn.execute(
                    "SELECT * FROM entries WHERE id = ?", (cursor.lastrowid,)
                ).fetchone()
            except (sqlite3.Error, OverflowError) as exc:
                raise StoreError(f"Failed to create entry: {exc}") from exc
        return row_to_entry(row)

    def find_by_id(self, entry_id: int) -> CatalogEntry | None:
        """Retrieve an entry by id, or None if it does not exist."""
        with self._lock:
            try:
                row = self._conn.execute(
                    "SELECT * FROM entries WHERE id = ?", (entry_id,)
                ).fetchone()
            except (sqlite3.Error, OverflowError) as exc:
                raise StoreError(f"Failed to look up entry {entry_id}: {exc}") from exc
        return row_to_entry(row) if row else None

    def delete_by_id(self, entry_id: int) -> None:
        """Delete an entry permanently.

        Raises:
            EntryNotFoundError: If no entry has this id.
            StoreError: If the delete fails.
        """
        with self._lock:
            try:
                cursor = self._conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
                self._conn.commit()
            except (sqlite3.Error, OverflowError) as exc:
                raise StoreError(f"Failed to delete entry {entry_id}: {exc}") from exc

        if cursor.rowcount == 0:
            raise EntryNotFoundError(entry_id)

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._conn.close()
