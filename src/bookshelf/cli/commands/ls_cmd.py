# ABOUTME: The `bookshelf ls` command for listing cataloged books.
# ABOUTME: Fetches entries from the catalog service and displays a Rich table.

import click
from rich.console import Console
from rich.table import Table

from bookshelf.cli import services
from bookshelf.cli.options import api_url_option
from bookshelf.client.api import CatalogRequestError
from bookshelf.client.cache import QueryCache
from bookshelf.client.submission import EntrySubmissionFlow

console = Console()


@click.command("ls")
@api_url_option
def ls(api_url: str) -> None:
    """List all books in the catalog."""
    api = services.create_api(api_url)
    flow = EntrySubmissionFlow(api, QueryCache())

    try:
        entries = flow.entries()
    except CatalogRequestError as exc:
        console.print(f"[red]Could not load the catalog from {api_url}: {exc}[/red]")
        raise SystemExit(1) from exc
    finally:
        api.close()

    if not entries:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("First published", justify="right")
    table.add_column("Editions", justify="right")

    for entry in entries:
        table.add_row(
            str(entry.id),
            str(entry.title or ""),
            str(entry.author or "") or "[dim]unknown[/dim]",
            str(entry.first_publish_year) if entry.first_publish_year is not None else "",
            str(entry.edition_count) if entry.edition_count is not None else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(entries)} book(s)[/dim]")
