# ABOUTME: The `homelib search` command for finding books by free text.
# ABOUTME: Matches title, authors, notes, tag names, and ISBN; a blank query shows nothing.

from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli.context import open_catalog
from homelibrary.cli.display import book_table
from homelibrary.cli.options import db_option
from homelibrary.core.browse import search_view

console = Console()


@click.command("search")
@click.argument("query")
@db_option
def search(query: str, db_path: Path | None) -> None:
    """Search the library by title, author, notes, tags, or ISBN."""
    with open_catalog(db_path) as catalog:
        locations = catalog.list_locations()
        results = search_view(catalog.list_books(), locations, query)

    if not results:
        console.print(f'[yellow]No books match "{query}".[/yellow]')
        return

    console.print(book_table(results, locations))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
