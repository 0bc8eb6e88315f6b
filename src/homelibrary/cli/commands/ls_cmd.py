# ABOUTME: The `homelib ls` command for listing the library with filters and sorting.
# ABOUTME: Sort defaults come from the saved settings; filters combine with AND.

from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli.context import open_catalog
from homelibrary.cli.display import book_table
from homelibrary.cli.options import ORDER_CHOICES, SORT_CHOICES, db_option
from homelibrary.core.browse import library_view
from homelibrary.library.filters import FilterState

console = Console()


@click.command("ls")
@click.option("--genre", "genres", multiple=True, help="Only this genre (repeatable).")
@click.option("--location", "locations", multiple=True, help="Only this saved location (repeatable).")
@click.option("--tag", "tags", multiple=True, help="Only books with this tag (repeatable).")
@click.option("--favorites", is_flag=True, default=False, help="Only favorites.")
@click.option("--search", "search_text", default="", help="Text to match in title, author, notes, tags, or ISBN.")
@click.option("--sort", "sort_key", type=click.Choice(list(SORT_CHOICES)), default=None, help="Sort field (default: saved setting).")
@click.option("--order", "order_key", type=click.Choice(list(ORDER_CHOICES)), default=None, help="Sort order (default: saved setting).")
@db_option
def ls(
    genres: tuple[str, ...],
    locations: tuple[str, ...],
    tags: tuple[str, ...],
    favorites: bool,
    search_text: str,
    sort_key: str | None,
    order_key: str | None,
    db_path: Path | None,
) -> None:
    """List books in the library."""
    with open_catalog(db_path) as catalog:
        settings = catalog.load_settings()
        saved_locations = catalog.list_locations()
        books = catalog.list_books()

        location_ids = set()
        for name in locations:
            saved = catalog.get_location_by_name(name)
            if saved is None:
                console.print(f"[red]Location '{name}' not found.[/red]")
                raise SystemExit(1)
            location_ids.add(saved.id)

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    state = FilterState(
        genres=frozenset(genres),
        location_ids=frozenset(location_ids),
        tag_names=frozenset(tags),
        favorites_only=favorites,
    )
    sort_option = SORT_CHOICES[sort_key] if sort_key else settings.sort_by
    sort_order = ORDER_CHOICES[order_key] if order_key else settings.sort_order
    shown = library_view(
        books,
        saved_locations,
        state,
        search_text=search_text,
        sort_option=sort_option,
        sort_order=sort_order,
    )

    if not shown:
        console.print("[yellow]No books match your search or filters.[/yellow]")
        return

    console.print(book_table(shown, saved_locations))
    summary = f"{len(shown)} book(s)"
    if state.active_filter_count:
        summary += f", {state.active_filter_count} filter(s) active"
    console.print(f"\n[dim]{summary}[/dim]")
