# ABOUTME: The `homelib settings` command group for viewing and changing preferences.
# ABOUTME: Settings are created with defaults the first time they are saved.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from homelibrary.cli.context import open_catalog
from homelibrary.cli.options import ORDER_CHOICES, SORT_CHOICES, db_option
from homelibrary.library.settings import AppearanceMode, StorageMode, ViewMode

console = Console()


@click.group("settings")
def settings() -> None:
    """View or change preferences."""


@settings.command("show")
@db_option
def settings_show(db_path: Path | None) -> None:
    """Show current preferences."""
    with open_catalog(db_path) as catalog:
        current = catalog.load_settings()

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Setting", style="bold", width=14)
    table.add_column("Value")
    table.add_row("View", current.view_mode.value)
    table.add_row("Sort By", current.sort_by.value)
    table.add_row("Sort Order", current.sort_order.value)
    table.add_row("Storage", current.storage_mode.value)
    table.add_row("Appearance", current.appearance_mode.value)
    console.print(table)


@settings.command("set")
@click.option("--view", type=click.Choice([m.value for m in ViewMode]), default=None)
@click.option("--sort", "sort_key", type=click.Choice(list(SORT_CHOICES)), default=None)
@click.option("--order", "order_key", type=click.Choice(list(ORDER_CHOICES)), default=None)
@click.option("--storage", type=click.Choice([m.value for m in StorageMode]), default=None)
@click.option(
    "--appearance",
    type=click.Choice([m.value for m in AppearanceMode], case_sensitive=False),
    default=None,
)
@db_option
def settings_set(
    view: str | None,
    sort_key: str | None,
    order_key: str | None,
    storage: str | None,
    appearance: str | None,
    db_path: Path | None,
) -> None:
    """Change one or more preferences."""
    if not any((view, sort_key, order_key, storage, appearance)):
        raise click.UsageError("Nothing to change.")

    with open_catalog(db_path) as catalog:
        current = catalog.load_settings()
        if view:
            current.view_mode = ViewMode(view)
        if sort_key:
            current.sort_by = SORT_CHOICES[sort_key]
        if order_key:
            current.sort_order = ORDER_CHOICES[order_key]
        if storage:
            current.storage_mode = StorageMode(storage)
        if appearance:
            current.appearance_mode = AppearanceMode(appearance)
        catalog.save_settings(current)

    console.print("Settings saved.")
