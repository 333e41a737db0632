# ABOUTME: The `bookshelf suggest` command for previewing Open Library suggestions.
# ABOUTME: Runs one title lookup and prints up to five candidates.

import click
from rich.console import Console

from bookshelf.cli import services
from bookshelf.cli.picker import render_suggestions
from bookshelf.metadata.http import SuggestionLookupError

console = Console()


@click.command("suggest")
@click.argument("query")
def suggest(query: str) -> None:
    """Show Open Library suggestions for a title."""
    if not query.strip():
        console.print("[red]Enter a title to search for.[/red]")
        raise SystemExit(1)

    source = services.create_suggestion_source()
    try:
        candidates = source.search(query)
    except SuggestionLookupError as exc:
        console.print(f"[red]Lookup failed: {exc}[/red]")
        raise SystemExit(1) from exc
    finally:
        source.close()

    if not candidates:
        console.print("[yellow]No suggestions found.[/yellow]")
        return

    render_suggestions(console, candidates)
