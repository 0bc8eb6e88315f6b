# ABOUTME: The `homelib info` command for displaying every field of a book.
# ABOUTME: Books are addressed by the id prefix shown in listings.

from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli.context import open_catalog, require_book
from homelibrary.cli.display import book_detail_table
from homelibrary.cli.options import db_option

console = Console()


@click.command("info")
@click.argument("book_id")
@db_option
def info(book_id: str, db_path: Path | None) -> None:
    """Show details for a book by ID."""
    with open_catalog(db_path) as catalog:
        book = require_book(catalog, book_id, console)
        console.print(book_detail_table(book, catalog.list_locations()))
