# ABOUTME: The `bookshelf rm` command for removing a book from the catalog.
# ABOUTME: Deletes by ID through the catalog service; reports missing IDs distinctly.

import click
from rich.console import Console

from bookshelf.cli import services
from bookshelf.cli.options import api_url_option
from bookshelf.client.api import CatalogRequestError, RemoteEntryNotFound
from bookshelf.client.cache import QueryCache
from bookshelf.client.submission import EntrySubmissionFlow

console = Console()


@click.command("rm")
@click.argument("entry_id", type=int)
@api_url_option
def rm(entry_id: int, api_url: str) -> None:
    """Remove a book from the catalog by ID."""
    api = services.create_api(api_url)
    flow = EntrySubmissionFlow(api, QueryCache())

    try:
        flow.delete(entry_id)
    except RemoteEntryNotFound as exc:
        console.print(f"[red]Book {entry_id} not found.[/red]")
        raise SystemExit(1) from exc
    except CatalogRequestError as exc:
        console.print(f"[red]{flow.error_message}[/red]")
        raise SystemExit(1) from exc
    finally:
        api.close()

    console.print(f"[green]Removed[/green] book {entry_id}.")
