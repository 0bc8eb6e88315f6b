# ABOUTME: The `homelib rm` command for deleting a book from the library.
# ABOUTME: Asks for confirmation unless --yes is given; deletion cannot be undone.

from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli.context import open_catalog, require_book
from homelibrary.cli.options import db_option

console = Console()


@click.command("rm")
@click.argument("book_id")
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False, help="Don't ask for confirmation.")
@db_option
def rm(book_id: str, assume_yes: bool, db_path: Path | None) -> None:
    """Delete a book by ID."""
    with open_catalog(db_path) as catalog:
        book = require_book(catalog, book_id, console)
        if not assume_yes and not click.confirm(f"Delete '{book.title}'?", default=False):
            console.print("Not deleted.")
            return
        catalog.delete_book(book)

    console.print(f"Deleted [bold]{book.title}[/bold].")
