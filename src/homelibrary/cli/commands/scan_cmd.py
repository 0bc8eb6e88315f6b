# ABOUTME: The `homelib scan` command for adding books with a keyboard-wedge barcode scanner.
# ABOUTME: Reads scanned codes from stdin, accepts the first ISBN, and looks it up.

import sys
from pathlib import Path

import click
from rich.console import Console

from homelibrary.cli import fetch
from homelibrary.cli.commands.add_cmd import save_form
from homelibrary.cli.context import open_catalog
from homelibrary.cli.display import lookup_table
from homelibrary.cli.options import db_option
from homelibrary.core.scanner import ScanSession
from homelibrary.errors import NotFoundError, ValidationError
from homelibrary.library.form import BookFormData

console = Console()


def _read_first_isbn(session: ScanSession) -> str | None:
    while True:
        line = sys.stdin.readline()
        if not line:
            return None
        code = session.offer(line.strip())
        if code is not None:
            return code


@click.command("scan")
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False, help="Add without asking.")
@click.option("--force", is_flag=True, default=False, help="Skip the duplicate check.")
@db_option
def scan(assume_yes: bool, force: bool, db_path: Path | None) -> None:
    """Scan a barcode and add the book it identifies.

    Barcode scanners that act as keyboards type each code followed by
    Enter. Lines that are not ISBNs are skipped; the first ISBN wins.
    """
    session = ScanSession()
    session.start()
    console.print("[dim]Waiting for a barcode...[/dim]")
    code = _read_first_isbn(session)
    if code is None:
        console.print("[yellow]No ISBN barcode scanned.[/yellow]")
        raise SystemExit(1)

    console.print(f"Scanned [cyan]{code}[/cyan]")
    try:
        result = fetch.fetch_by_isbn(code)
    except NotFoundError as exc:
        console.print(
            f"[red]No book found for ISBN {code}. "
            "Add it manually with `homelib add --title ...`.[/red]"
        )
        raise SystemExit(1) from exc

    console.print(lookup_table(result))
    if not assume_yes and not click.confirm("Add to library?", default=True):
        console.print("Not added.")
        return

    form = BookFormData.from_lookup(result)
    with open_catalog(db_path) as catalog:
        try:
            save_form(catalog, form, force=force)
        except ValidationError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc
