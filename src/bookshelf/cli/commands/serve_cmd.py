# ABOUTME: The `bookshelf serve` command for running the catalog service.
# ABOUTME: Builds the FastAPI app for the chosen database and serves it with uvicorn.

from pathlib import Path

import click
import uvicorn

from bookshelf.api.app import create_app
from bookshelf.cli.options import db_option
from bookshelf.config import DEFAULT_DB_PATH, DEFAULT_HOST, DEFAULT_PORT


@click.command("serve")
@db_option
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Interface to bind.")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="Port to bind.")
def serve(db_path: Path | None, host: str, port: int) -> None:
    """Run the catalog HTTP service."""
    app = create_app(db_path=db_path or DEFAULT_DB_PATH)
    click.echo(f"Serving {db_path or DEFAULT_DB_PATH} on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
