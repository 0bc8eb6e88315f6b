# ABOUTME: The `homelib location` command group for managing saved locations.
# ABOUTME: Deleting a location leaves its books pointing at "Unknown Location".

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from homelibrary.cli.context import open_catalog
from homelibrary.cli.options import db_option
from homelibrary.library.types import LocationKind, PredefinedLocation

console = Console()


@click.group("location")
def location() -> None:
    """Manage saved locations."""


@location.command("add")
@click.argument("name")
@db_option
def location_add(name: str, db_path: Path | None) -> None:
    """Save a location such as "Living Room - Shelf A"."""
    name = name.strip()
    if not name:
        console.print("[red]Location name is required.[/red]")
        raise SystemExit(1)

    with open_catalog(db_path) as catalog:
        if catalog.get_location_by_name(name) is not None:
            console.print(f"[red]Location '{name}' already exists.[/red]")
            raise SystemExit(1)
        catalog.insert_location(PredefinedLocation(name=name))

    console.print(f"Added location [bold]{name}[/bold].")


@location.command("ls")
@db_option
def location_ls(db_path: Path | None) -> None:
    """List saved locations with book counts."""
    with open_catalog(db_path) as catalog:
        locations = catalog.list_locations()
        books = catalog.list_books()

    if not locations:
        console.print("[yellow]No saved locations.[/yellow]")
        return

    table = Table()
    table.add_column("Location", style="bold")
    table.add_column("Books", style="dim", justify="right")

    for saved in locations:
        count = sum(
            1
            for book in books
            if book.location is not None
            and book.location.kind is LocationKind.PREDEFINED
            and book.location.predefined_id == saved.id
        )
        table.add_row(saved.name, str(count))

    console.print(table)


@location.command("rename")
@click.argument("old_name")
@click.argument("new_name")
@db_option
def location_rename(old_name: str, new_name: str, db_path: Path | None) -> None:
    """Rename a saved location. Books follow the new name."""
    with open_catalog(db_path) as catalog:
        saved = catalog.get_location_by_name(old_name)
        if saved is None:
            console.print(f"[red]Location '{old_name}' not found.[/red]")
            raise SystemExit(1)
        saved.name = new_name
        catalog.update_location(saved)

    console.print(f"Renamed location [bold]{old_name}[/bold] to [bold]{new_name}[/bold].")


@location.command("rm")
@click.argument("name")
@db_option
def location_rm(name: str, db_path: Path | None) -> None:
    """Delete a saved location."""
    with open_catalog(db_path) as catalog:
        saved = catalog.get_location_by_name(name)
        if saved is None:
            console.print(f"[red]Location '{name}' not found.[/red]")
            raise SystemExit(1)
        catalog.delete_location(saved)

    console.print(f"Deleted location [bold]{name}[/bold].")
