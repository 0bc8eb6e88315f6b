# ABOUTME: The `homelib edit` command for changing fields of an existing book.
# ABOUTME: Only the options given are changed; everything else is kept as stored.

from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli.commands.add_cmd import apply_location, ensure_tags
from homelibrary.cli.context import open_catalog, require_book
from homelibrary.cli.options import db_option
from homelibrary.errors import ValidationError
from homelibrary.library.form import BookFormData, LocationChoice

console = Console()


@click.command("edit")
@click.argument("book_id")
@click.option("--title", default=None, help="New title.")
@click.option("--author", "authors", multiple=True, help="Replace authors (repeatable).")
@click.option("--genre", default=None, help="New genre; empty string clears it.")
@click.option("--isbn", default=None, help="New ISBN; empty string clears it.")
@click.option("--notes", default=None, help="New notes; empty string clears them.")
@click.option("--location", "location_name", default=None, help="Saved location name.")
@click.option("--custom-location", default=None, help="Free-text location.")
@click.option("--clear-location", is_flag=True, default=False, help="Remove the location.")
@db_option
def edit(
    book_id: str,
    title: str | None,
    authors: tuple[str, ...],
    genre: str | None,
    isbn: str | None,
    notes: str | None,
    location_name: str | None,
    custom_location: str | None,
    clear_location: bool,
    db_path: Path | None,
) -> None:
    """Edit a book by ID."""
    with open_catalog(db_path) as catalog:
        book = require_book(catalog, book_id, console)
        form = BookFormData.from_book(book)
        if title is not None:
            form.title = title
        if authors:
            form.authors = ", ".join(authors)
        if genre is not None:
            form.genre = genre
        if isbn is not None:
            form.isbn = isbn
        if notes is not None:
            form.notes = notes
        if clear_location:
            form.location_choice = LocationChoice.NONE

        try:
            apply_location(form, catalog, location_name, custom_location)
            form.apply_to(book)
        except (ValueError, ValidationError) as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

        ensure_tags(catalog, book.tags)
        catalog.update_book(book)

    console.print(f"Updated [bold]{book.title}[/bold].")
