# ABOUTME: Client-side pieces of Bookshelf: service client, query cache, lookup controller.
# ABOUTME: Exports the types a front end needs to search, add, and remove books.

from bookshelf.client.api import (
    CatalogApiClient,
    CatalogBackend,
    CatalogRequestError,
    RemoteEntryNotFound,
)
from bookshelf.client.cache import QueryCache
from bookshelf.client.debounce import DebouncedQueryController, TimerScheduler
from bookshelf.client.submission import (
    DraftValidationError,
    EntryDraft,
    EntrySubmissionFlow,
    MutationStatus,
)

__all__ = [
    "CatalogApiClient",
    "CatalogBackend",
    "CatalogRequestError",
    "DebouncedQueryController",
    "DraftValidationError",
    "EntryDraft",
    "EntrySubmissionFlow",
    "MutationStatus",
    "QueryCache",
    "RemoteEntryNotFound",
    "TimerScheduler",
]
