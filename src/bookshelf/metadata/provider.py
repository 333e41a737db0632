# ABOUTME: SuggestionSource protocol defining the contract for title lookups.
# ABOUTME: Open Library implements it; tests substitute in-memory fakes.

from typing import Protocol, runtime_checkable

from bookshelf.metadata.candidate import SuggestionCandidate


@runtime_checkable
class SuggestionSource(Protocol):
    """Protocol for free-text title lookup services.

    Implementations return at most a handful of candidates and raise
    SuggestionLookupError when the source cannot be reached or parsed.
    """

    @property
    def name(self) -> str: ...

    def search(self, title_query: str) -> list[SuggestionCandidate]: ...

    def close(self) -> None: ...
