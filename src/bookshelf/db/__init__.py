# ABOUTME: Public API for the Bookshelf catalog database layer.
# ABOUTME: Exports connection management, the entry store, and data types.

from bookshelf.db.connection import open_catalog
from bookshelf.db.mapping import CatalogEntry
from bookshelf.db.store import EntryNotFoundError, EntryStore, StoreError

__all__ = [
    "CatalogEntry",
    "EntryNotFoundError",
    "EntryStore",
    "StoreError",
    "open_catalog",
]
