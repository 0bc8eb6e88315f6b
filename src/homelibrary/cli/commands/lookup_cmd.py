# ABOUTME: The `homelib lookup` command for previewing metadata without saving anything.
# ABOUTME: Looks up by ISBN across providers, or searches by title and author.

import click
from rich.console import Console

from homelibrary.cli import fetch
from homelibrary.cli.display import lookup_table
from homelibrary.errors import NotFoundError

console = Console()


@click.command("lookup")
@click.argument("isbn", required=False)
@click.option("--title", default=None, help="Search by title instead of ISBN.")
@click.option("--author", default=None, help="Narrow a title search by author.")
def lookup(isbn: str | None, title: str | None, author: str | None) -> None:
    """Look up book details by ISBN, or by --title and --author."""
    if not isbn and not title:
        raise click.UsageError("Give an ISBN or --title.")
    if isbn and title:
        raise click.UsageError("Give an ISBN or --title, not both.")

    try:
        if isbn:
            result = fetch.fetch_by_isbn(isbn)
        else:
            result = fetch.fetch_by_title(title or "", author)
    except NotFoundError as exc:
        console.print(f"[yellow]{exc}.[/yellow]")
        raise SystemExit(1) from exc

    console.print(lookup_table(result))
