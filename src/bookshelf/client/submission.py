# ABOUTME: Entry submission flow: draft editing, suggestion selection, create and delete.
# ABOUTME: Invalidates the cached entry list after successful mutations.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from bookshelf.client.api import CatalogBackend, CatalogRequestError
from bookshelf.client.cache import QueryCache
from bookshelf.client.debounce import DebouncedQueryController
from bookshelf.db.mapping import CatalogEntry
from bookshelf.metadata.candidate import SuggestionCandidate

logger = logging.getLogger(__name__)

BOOKS_KEY = ("books",)

MISSING_FIELDS_MESSAGE = "Please enter both title and author."
CREATE_FAILED_MESSAGE = "The book could not be added. Please try again."
DELETE_FAILED_MESSAGE = "The book could not be removed; it is still in the catalog."


class DraftValidationError(Exception):
    """Raised when a draft is submitted without a title or author."""


class MutationStatus(Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class EntryDraft:
    """Fields of the entry being composed, before it is submitted."""

    title: str = ""
    author: str = ""
    first_publish_year: int | None = None
    edition_count: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Build the create request body: trimmed text, absent numbers left out."""
        payload: dict[str, Any] = {
            "title": self.title.strip(),
            "author": self.author.strip(),
        }
        if self.first_publish_year is not None:
            payload["first_publish_year"] = self.first_publish_year
        if self.edition_count is not None:
            payload["edition_count"] = self.edition_count
        return payload


class EntrySubmissionFlow:
    """Composes drafts into create requests and keeps the entry list cache honest.

    Mutations never retry and never touch the cached list optimistically:
    success invalidates it so the next read refetches, failure leaves
    everything (draft and list) as it was.
    """

    def __init__(
        self,
        api: CatalogBackend,
        cache: QueryCache,
        controller: DebouncedQueryController | None = None,
    ) -> None:
        self._api = api
        self._cache = cache
        self._controller = controller
        self.draft = EntryDraft()
        self.create_status = MutationStatus.IDLE
        self.delete_status = MutationStatus.IDLE
        self.error_message: str | None = None

    def entries(self) -> list[CatalogEntry]:
        """Read the catalog list, from cache while it is fresh."""
        return self._cache.fetch(BOOKS_KEY, self._api.list_entries)

    def select(self, candidate: SuggestionCandidate) -> None:
        """Copy a suggestion into the draft and end the search session."""
        self.draft = EntryDraft(
            title=candidate.title,
            author=candidate.author_name or "",
            first_publish_year=candidate.first_publish_year,
            edition_count=candidate.edition_count,
        )
        if self._controller is not None:
            self._controller.reset()

    def submit(self) -> CatalogEntry:
        """Create an entry from the current draft.

        Raises:
            DraftValidationError: If title or author is blank. Nothing is sent.
            CatalogRequestError: If the service call fails. The draft is kept.
        """
        if not self.draft.title.strip() or not self.draft.author.strip():
            self.error_message = MISSING_FIELDS_MESSAGE
            raise DraftValidationError(MISSING_FIELDS_MESSAGE)

        self.create_status = MutationStatus.PENDING
        try:
            entry = self._api.create_entry(self.draft.to_payload())
        except CatalogRequestError as exc:
            logger.error("Creating %r failed: %s", self.draft.title, exc)
            self.create_status = MutationStatus.ERROR
            self.error_message = CREATE_FAILED_MESSAGE
            raise

        self.create_status = MutationStatus.SUCCESS
        self.error_message = None
        self._cache.invalidate(BOOKS_KEY)
        self.reset()
        return entry

    def delete(self, entry_id: int) -> None:
        """Delete an entry through the service.

        Raises:
            CatalogRequestError: If the service call fails (including
                RemoteEntryNotFound). The cached list is left untouched.
        """
        self.delete_status = MutationStatus.PENDING
        try:
            self._api.delete_entry(entry_id)
        except CatalogRequestError as exc:
            logger.error("Deleting entry %d failed: %s", entry_id, exc)
            self.delete_status = MutationStatus.ERROR
            self.error_message = DELETE_FAILED_MESSAGE
            raise

        self.delete_status = MutationStatus.SUCCESS
        self.error_message = None
        self._cache.invalidate(BOOKS_KEY)

    def reset(self) -> None:
        """Clear the draft and the search session."""
        self.draft = EntryDraft()
        if self._controller is not None:
            self._controller.reset()
