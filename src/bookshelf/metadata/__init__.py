# ABOUTME: Metadata package for looking up book suggestions from external sources.
# ABOUTME: Exports the candidate type, the source protocol, and the Open Library source.

from bookshelf.metadata.candidate import SuggestionCandidate
from bookshelf.metadata.http import BookshelfHttpClient, SuggestionLookupError
from bookshelf.metadata.openlibrary import OpenLibrarySuggestions
from bookshelf.metadata.provider import SuggestionSource

__all__ = [
    "BookshelfHttpClient",
    "OpenLibrarySuggestions",
    "SuggestionCandidate",
    "SuggestionLookupError",
    "SuggestionSource",
]
