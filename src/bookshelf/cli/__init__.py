# ABOUTME: CLI package for Bookshelf, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from bookshelf.cli.commands import add_cmd, ls_cmd, rm_cmd, serve_cmd, suggest_cmd


@click.group()
@click.version_option(package_name="bookshelf")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Bookshelf - a personal book catalog with Open Library suggestions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


cli.add_command(serve_cmd.serve)
cli.add_command(ls_cmd.ls)
cli.add_command(add_cmd.add)
cli.add_command(rm_cmd.rm)
cli.add_command(suggest_cmd.suggest)
