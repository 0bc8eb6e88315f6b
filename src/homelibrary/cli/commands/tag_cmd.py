# ABOUTME: The `homelib tag` command group for managing tags and tagging books.
# ABOUTME: Tags are referenced by name from books; renames and deletes don't cascade.

import re
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from homelibrary.cli.commands.add_cmd import ensure_tags
from homelibrary.cli.context import open_catalog, require_book
from homelibrary.cli.options import db_option
from homelibrary.library.tags import TagColorRotation, create_tag

console = Console()

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@click.group("tag")
def tag() -> None:
    """Manage tags."""


@tag.command("create")
@click.argument("name")
@click.option("--color", default=None, help="Hex color such as #EC4899 (default: next in rotation).")
@db_option
def tag_create(name: str, color: str | None, db_path: Path | None) -> None:
    """Create a tag."""
    if color is not None and not _HEX_COLOR_RE.match(color):
        console.print(f"[red]Invalid color '{color}'; expected #RRGGBB.[/red]")
        raise SystemExit(1)

    with open_catalog(db_path) as catalog:
        if catalog.get_tag_by_name(name) is not None:
            console.print(f"[red]Tag '{name}' already exists.[/red]")
            raise SystemExit(1)
        rotation = TagColorRotation.from_existing(catalog.count_tags())
        new_tag = create_tag(name, rotation, color)
        catalog.insert_tag(new_tag)

    console.print(f"Created tag [cyan]{name}[/cyan] ({new_tag.color_hex}).")


@tag.command("ls")
@db_option
def tag_ls(db_path: Path | None) -> None:
    """List all tags with book counts."""
    with open_catalog(db_path) as catalog:
        tags = catalog.list_tags()
        books = catalog.list_books()

    if not tags:
        console.print("[yellow]No tags in the library.[/yellow]")
        return

    table = Table()
    table.add_column("Tag", style="cyan")
    table.add_column("Color")
    table.add_column("Books", style="dim", justify="right")

    for user_tag in tags:
        count = sum(1 for book in books if user_tag.name in book.tags)
        table.add_row(
            user_tag.name,
            f"[{user_tag.color_hex}]■[/] {user_tag.color_hex}",
            str(count),
        )

    console.print(table)


@tag.command("rm")
@click.argument("name")
@db_option
def tag_rm(name: str, db_path: Path | None) -> None:
    """Delete a tag. Books keep the name in their tag lists."""
    with open_catalog(db_path) as catalog:
        user_tag = catalog.get_tag_by_name(name)
        if user_tag is None:
            console.print(f"[red]Tag '{name}' not found.[/red]")
            raise SystemExit(1)
        catalog.delete_tag(user_tag)

    console.print(f"Deleted tag [cyan]{name}[/cyan].")


@tag.command("rename")
@click.argument("old_name")
@click.argument("new_name")
@db_option
def tag_rename(old_name: str, new_name: str, db_path: Path | None) -> None:
    """Rename a tag. Books tagged with the old name are not changed."""
    with open_catalog(db_path) as catalog:
        user_tag = catalog.get_tag_by_name(old_name)
        if user_tag is None:
            console.print(f"[red]Tag '{old_name}' not found.[/red]")
            raise SystemExit(1)
        user_tag.name = new_name
        catalog.update_tag(user_tag)

    console.print(f"Renamed tag [cyan]{old_name}[/cyan] to [cyan]{new_name}[/cyan].")


@tag.command("add")
@click.argument("book_id")
@click.argument("tag_name")
@db_option
def tag_add(book_id: str, tag_name: str, db_path: Path | None) -> None:
    """Add a tag to a book, creating the tag if needed."""
    with open_catalog(db_path) as catalog:
        book = require_book(catalog, book_id, console)
        if tag_name in book.tags:
            console.print(f"[yellow]{book.title} is already tagged {tag_name}.[/yellow]")
            return
        ensure_tags(catalog, [tag_name])
        book.tags.append(tag_name)
        book.touch()
        catalog.update_book(book)

    console.print(f"Tagged [bold]{book.title}[/bold] with [cyan]{tag_name}[/cyan].")


@tag.command("remove")
@click.argument("book_id")
@click.argument("tag_name")
@db_option
def tag_remove(book_id: str, tag_name: str, db_path: Path | None) -> None:
    """Remove a tag from a book."""
    with open_catalog(db_path) as catalog:
        book = require_book(catalog, book_id, console)
        if tag_name not in book.tags:
            console.print(f"[red]{book.title} is not tagged {tag_name}.[/red]")
            raise SystemExit(1)
        book.tags.remove(tag_name)
        book.touch()
        catalog.update_book(book)

    console.print(f"Removed tag [cyan]{tag_name}[/cyan] from [bold]{book.title}[/bold].")
