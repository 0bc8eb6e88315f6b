# ABOUTME: The `homelib fav` command for toggling a book's favorite flag.

from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli.context import open_catalog, require_book
from homelibrary.cli.options import db_option

console = Console()


@click.command("fav")
@click.argument("book_id")
@db_option
def fav(book_id: str, db_path: Path | None) -> None:
    """Toggle whether a book is a favorite."""
    with open_catalog(db_path) as catalog:
        book = require_book(catalog, book_id, console)
        book.toggle_favorite()
        catalog.update_book(book)

    if book.is_favorite:
        console.print(f"Marked [bold]{book.title}[/bold] as a favorite.")
    else:
        console.print(f"Removed [bold]{book.title}[/bold] from favorites.")
