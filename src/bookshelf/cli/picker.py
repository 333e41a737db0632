# ABOUTME: Interactive picker for suggestion candidates.
# ABOUTME: Displays candidates in a Rich table and prompts the user to choose one or skip.

import click
from rich.console import Console
from rich.table import Table

from bookshelf.metadata.candidate import SuggestionCandidate


def render_suggestions(console: Console, candidates: list[SuggestionCandidate]) -> None:
    """Print a numbered table of candidates."""
    table = Table(title="Suggestions")
    table.add_column("#", style="bold", width=3)
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("First published", justify="right")
    table.add_column("Editions", justify="right")

    for i, candidate in enumerate(candidates, start=1):
        table.add_row(
            str(i),
            candidate.title,
            candidate.author_name or "—",
            str(candidate.first_publish_year) if candidate.first_publish_year is not None else "—",
            str(candidate.edition_count) if candidate.edition_count is not None else "—",
        )

    console.print(table)


class SuggestionPicker:
    """Interactive selection of one suggestion from a short list."""

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console or Console()

    def pick(self, candidates: list[SuggestionCandidate]) -> SuggestionCandidate | None:
        """Show candidates and return the chosen one, or None if the user skips."""
        if not candidates:
            return None

        render_suggestions(self._console, candidates)

        while True:
            choice = click.prompt("[1-N] Select  [s] Skip", type=str, default="s")
            if choice.lower() == "s":
                return None
            try:
                idx = int(choice) - 1
            except ValueError:
                continue
            if 0 <= idx < len(candidates):
                return candidates[idx]
