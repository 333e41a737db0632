# ABOUTME: Factories for the collaborators CLI commands talk to.
# ABOUTME: Commands call these through the module so tests can substitute fakes.

from bookshelf.client.api import CatalogApiClient, CatalogBackend
from bookshelf.metadata.http import BookshelfHttpClient
from bookshelf.metadata.openlibrary import OpenLibrarySuggestions
from bookshelf.metadata.provider import SuggestionSource


def create_api(api_url: str) -> CatalogBackend:
    """Create the catalog service client."""
    return CatalogApiClient(api_url)


def create_suggestion_source() -> SuggestionSource:
    """Create the default suggestion source (Open Library)."""
    return OpenLibrarySuggestions(http_client=BookshelfHttpClient())
