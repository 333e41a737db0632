# ABOUTME: Parsing functions for Open Library search API JSON responses.
# ABOUTME: Maps untrusted search docs into SuggestionCandidate instances.

from typing import Any

from bookshelf.metadata.candidate import SuggestionCandidate


def _as_int(value: Any) -> int | None:
    """Return value if it is a real integer (bools excluded), else None."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def parse_first_author(doc: dict[str, Any]) -> str | None:
    """Extract the first author name from a search doc.

    author_name is normally a list of strings; anything else counts as absent.
    """
    authors = doc.get("author_name")
    if not isinstance(authors, list) or not authors:
        return None
    first = authors[0]
    return first if isinstance(first, str) and first else None


def parse_search_doc(doc: dict[str, Any]) -> SuggestionCandidate:
    """Convert a single Open Library search doc into a SuggestionCandidate."""
    title = doc.get("title")
    return SuggestionCandidate(
        title=title if isinstance(title, str) else "",
        author_name=parse_first_author(doc),
        first_publish_year=_as_int(doc.get("first_publish_year")),
        edition_count=_as_int(doc.get("edition_count")),
    )


def parse_search_results(data: Any, limit: int) -> list[SuggestionCandidate]:
    """Parse an Open Library search response, keeping at most `limit` docs.

    Raises:
        ValueError: If the response is not an object with a `docs` list.
    """
    if not isinstance(data, dict):
        raise ValueError("search response is not a JSON object")
    docs = data.get("docs")
    if not isinstance(docs, list):
        raise ValueError("search response has no docs list")

    return [parse_search_doc(doc) for doc in docs[:limit] if isinstance(doc, dict)]
