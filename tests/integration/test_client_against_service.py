# ABOUTME: Integration tests running the client-side flow against the real service in-process.
# ABOUTME: The service's TestClient stands in for the network between client and server.

import pytest
from fastapi.testclient import TestClient

from bookshelf.client.api import CatalogApiClient, RemoteEntryNotFound
from bookshelf.client.cache import QueryCache
from bookshelf.client.submission import EntryDraft, EntrySubmissionFlow
from bookshelf.metadata.candidate import SuggestionCandidate


@pytest.fixture()
def flow(api_client: TestClient) -> EntrySubmissionFlow:
    return EntrySubmissionFlow(CatalogApiClient(client=api_client), QueryCache())


class TestAddAndRemove:
    """End-to-end add, list, and remove through the HTTP boundary."""

    def test_add_from_suggestion_then_list(self, flow: EntrySubmissionFlow) -> None:
        assert flow.entries() == []

        flow.select(SuggestionCandidate("Dune", "Frank Herbert", 1965, 142))
        created = flow.submit()

        [listed] = flow.entries()
        assert listed == created
        assert listed.first_publish_year == 1965
        assert listed.edition_count == 142

    def test_typed_entry_without_optionals(self, flow: EntrySubmissionFlow) -> None:
        flow.draft = EntryDraft(title="  Emma ", author="Jane Austen ")
        created = flow.submit()
        assert created.title == "Emma"
        assert created.author == "Jane Austen"
        assert created.first_publish_year is None

    def test_remove_then_remove_again(self, flow: EntrySubmissionFlow) -> None:
        flow.draft = EntryDraft("Dune", "Frank Herbert")
        created = flow.submit()
        flow.delete(created.id)
        assert flow.entries() == []

        with pytest.raises(RemoteEntryNotFound):
            flow.delete(created.id)
