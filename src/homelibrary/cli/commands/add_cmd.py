# ABOUTME: The `homelib add` command for adding a book manually or from an ISBN lookup.
# ABOUTME: Warns about likely duplicates before saving and creates missing tags on the fly.

import logging
from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli import fetch
from homelibrary.cli.context import open_catalog
from homelibrary.cli.display import lookup_table, short_id
from homelibrary.cli.options import db_option
from homelibrary.db.catalog import LibraryCatalog
from homelibrary.errors import NotFoundError, ValidationError
from homelibrary.library.duplicates import find_duplicate
from homelibrary.library.form import BookFormData, LocationChoice
from homelibrary.library.tags import TagColorRotation, create_tag

logger = logging.getLogger(__name__)

console = Console()


def apply_location(
    form: BookFormData,
    catalog: LibraryCatalog,
    location_name: str | None,
    custom_location: str | None,
) -> None:
    """Point the form at a saved location by name, or at free text.

    Raises:
        click.UsageError: If both are given.
        ValueError: If the saved location does not exist.
    """
    if location_name and custom_location:
        raise click.UsageError("Use either --location or --custom-location, not both.")
    if location_name:
        saved = catalog.get_location_by_name(location_name)
        if saved is None:
            raise ValueError(f"Location '{location_name}' not found")
        form.location_choice = LocationChoice.PREDEFINED
        form.selected_location_id = saved.id
    elif custom_location:
        form.location_choice = LocationChoice.CUSTOM
        form.custom_location_text = custom_location


def ensure_tags(catalog: LibraryCatalog, names: list[str]) -> None:
    """Create tag records for any names the catalog doesn't know yet."""
    rotation = TagColorRotation.from_existing(catalog.count_tags())
    for name in names:
        if catalog.get_tag_by_name(name) is None:
            catalog.insert_tag(create_tag(name, rotation))
            logger.info("Created tag %s", name)


def save_form(catalog: LibraryCatalog, form: BookFormData, *, force: bool) -> bool:
    """Validate the form and insert it as a new book.

    Asks for confirmation when the title and an author match a book
    already in the library, unless force is set.

    Returns:
        True if the book was added, False if the user declined.

    Raises:
        ValidationError: If the form cannot be saved.
    """
    form.validate()
    if not force:
        duplicate = find_duplicate(form.title, form.authors_list, catalog.list_books())
        if duplicate is not None:
            console.print(
                f"[yellow]'{duplicate.title}' by {duplicate.authors_display} "
                f"is already in your library ({short_id(duplicate.id)}).[/yellow]"
            )
            if not click.confirm("Add anyway?", default=False):
                console.print("Not added.")
                return False

    book = form.to_book()
    ensure_tags(catalog, book.tags)
    catalog.insert_book(book)
    console.print(f"Added [bold]{book.title}[/bold] ({short_id(book.id)}).")
    return True


@click.command("add")
@click.option("--isbn", default=None, help="Look up details by ISBN before saving.")
@click.option("--title", default=None, help="Book title.")
@click.option("--author", "authors", multiple=True, help="Author name (repeatable).")
@click.option("--genre", default=None, help="Genre.")
@click.option("--notes", default=None, help="Free-form notes.")
@click.option("--location", "location_name", default=None, help="Saved location name.")
@click.option("--custom-location", default=None, help="Free-text location.")
@click.option("--tag", "tags", multiple=True, help="Tag name (repeatable).")
@click.option("--favorite", is_flag=True, default=False, help="Mark as favorite.")
@click.option("--force", is_flag=True, default=False, help="Skip the duplicate check.")
@db_option
def add(
    isbn: str | None,
    title: str | None,
    authors: tuple[str, ...],
    genre: str | None,
    notes: str | None,
    location_name: str | None,
    custom_location: str | None,
    tags: tuple[str, ...],
    favorite: bool,
    force: bool,
    db_path: Path | None,
) -> None:
    """Add a book to the library.

    With --isbn the details are looked up first; any other option given
    overrides the looked-up value.
    """
    form = BookFormData()
    if isbn:
        try:
            result = fetch.fetch_by_isbn(isbn)
        except NotFoundError:
            console.print(f"[yellow]No details found for ISBN {isbn}; using what you entered.[/yellow]")
            form.isbn = isbn
        else:
            console.print(lookup_table(result))
            form = BookFormData.from_lookup(result)

    if title is not None:
        form.title = title
    if authors:
        form.authors = ", ".join(authors)
    if genre is not None:
        form.genre = genre
    if notes is not None:
        form.notes = notes
    form.selected_tags = list(dict.fromkeys(tags))
    form.is_favorite = favorite

    with open_catalog(db_path) as catalog:
        try:
            apply_location(form, catalog, location_name, custom_location)
            save_form(catalog, form, force=force)
        except (ValueError, ValidationError) as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc
