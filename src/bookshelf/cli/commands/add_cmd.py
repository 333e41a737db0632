# ABOUTME: The `bookshelf add` command for adding a book to the catalog.
# ABOUTME: Optionally searches Open Library first and prefills the entry from a suggestion.

import click
from rich.console import Console
from rich.markup import escape

from bookshelf.cli import services
from bookshelf.cli.options import api_url_option
from bookshelf.cli.picker import SuggestionPicker
from bookshelf.client.api import CatalogRequestError
from bookshelf.client.cache import QueryCache
from bookshelf.client.debounce import DebouncedQueryController
from bookshelf.client.submission import DraftValidationError, EntrySubmissionFlow

console = Console()

_LOOKUP_TIMEOUT = 60.0


@click.command("add")
@api_url_option
@click.option("--title", default=None, help="Book title.")
@click.option("--author", default=None, help="Book author.")
@click.option("--year", "first_publish_year", type=int, default=None, help="First publication year.")
@click.option("--editions", "edition_count", type=click.IntRange(min=0), default=None,
              help="Number of known editions.")
@click.option("--search", "search_query", default=None,
              help="Look up this title on Open Library and pick a suggestion.")
def add(
    api_url: str,
    title: str | None,
    author: str | None,
    first_publish_year: int | None,
    edition_count: int | None,
    search_query: str | None,
) -> None:
    """Add a book to the catalog."""
    cache = QueryCache()
    source = None
    controller = None
    if search_query:
        source = services.create_suggestion_source()
        controller = DebouncedQueryController(source.search, cache=cache)
    api = services.create_api(api_url)
    flow = EntrySubmissionFlow(api, cache, controller)

    try:
        if controller is not None:
            controller.update(search_query)
            if not controller.wait_until_idle(timeout=_LOOKUP_TIMEOUT):
                console.print("[yellow]Suggestion lookup timed out.[/yellow]")
            candidates = controller.suggestions
            if not candidates:
                console.print("[yellow]No suggestions found.[/yellow]")
            chosen = SuggestionPicker(console=console).pick(candidates)
            if chosen is not None:
                console.print(f"Selected [bold]{escape(chosen.label)}[/bold]")
                flow.select(chosen)

        # Explicit options win over whatever the suggestion filled in.
        draft = flow.draft
        if title is not None:
            draft.title = title
        if author is not None:
            draft.author = author
        if first_publish_year is not None:
            draft.first_publish_year = first_publish_year
        if edition_count is not None:
            draft.edition_count = edition_count

        if not draft.title.strip():
            draft.title = click.prompt("Title", default="", show_default=False)
        if not draft.author.strip():
            draft.author = click.prompt("Author", default="", show_default=False)

        try:
            entry = flow.submit()
        except DraftValidationError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc
        except CatalogRequestError as exc:
            console.print(f"[red]{flow.error_message}[/red]")
            raise SystemExit(1) from exc
    finally:
        if controller is not None:
            controller.close()
        if source is not None:
            source.close()
        api.close()

    console.print(f"[green]Added[/green] #{entry.id} [bold]{entry.title}[/bold] by {entry.author}")
