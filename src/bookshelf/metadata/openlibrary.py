# ABOUTME: Open Library suggestion source.
# ABOUTME: Searches openlibrary.org by title and returns up to five candidates.

import logging

from bookshelf.config import OPENLIBRARY_BASE_URL, SEARCH_LIMIT
from bookshelf.metadata.candidate import SuggestionCandidate
from bookshelf.metadata.http import HttpClient, SuggestionLookupError
from bookshelf.metadata.openlibrary_parser import parse_search_results

logger = logging.getLogger(__name__)


class OpenLibrarySuggestions:
    """Suggestion source backed by the Open Library search API.

    Uses a dependency-injected HttpClient for testability. Failures are
    raised as SuggestionLookupError; deciding how to degrade is up to the
    caller.
    """

    def __init__(
        self,
        http_client: HttpClient,
        *,
        base_url: str = OPENLIBRARY_BASE_URL,
        limit: int = SEARCH_LIMIT,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._limit = limit

    @property
    def name(self) -> str:
        return "openlibrary"

    def search(self, title_query: str) -> list[SuggestionCandidate]:
        """Look up books whose title matches the query.

        The query is sent as-is as a title filter. The source may ignore the
        limit parameter, so results are truncated here as well.

        Raises:
            SuggestionLookupError: If the request fails or the body is not a
                search response.
        """
        params = {"title": title_query, "limit": str(self._limit)}
        data = self._http.get(f"{self._base_url}/search.json", params=params)

        try:
            candidates = parse_search_results(data, self._limit)
        except ValueError as exc:
            raise SuggestionLookupError(
                f"Unexpected search response for title={title_query!r}: {exc}"
            ) from exc

        logger.debug("Open Library returned %d candidate(s) for %r", len(candidates), title_query)
        return candidates

    def close(self) -> None:
        """Release the HTTP client this source was built with."""
        self._http.close()
