# ABOUTME: Shared Click options for Bookshelf CLI commands.
# ABOUTME: Provides reusable decorators for --db and --api-url.

from pathlib import Path

import click

from bookshelf.config import DEFAULT_API_URL, DEFAULT_DB_PATH

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    envvar="BOOKSHELF_DB",
    default=None,
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH})",
)

api_url_option = click.option(
    "--api-url",
    "api_url",
    envvar="BOOKSHELF_API_URL",
    default=DEFAULT_API_URL,
    show_default=True,
    help="Base URL of the catalog service.",
)
