# ABOUTME: SuggestionCandidate is a transient book record offered from an external search.
# ABOUTME: Used only to prefill a new catalog entry; never stored itself.

from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestionCandidate:
    """A candidate book returned by the bibliographic source.

    Only the first listed author is kept. Optional numbers are None when the
    source omitted them or sent something that is not an integer.
    """

    title: str
    author_name: str | None = None
    first_publish_year: int | None = None
    edition_count: int | None = None

    @property
    def label(self) -> str:
        """Display form: title followed by the author, when known."""
        if self.author_name:
            return f"{self.title} — {self.author_name}"
        return self.title
