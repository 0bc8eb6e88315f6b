# ABOUTME: Rich renderables for books and lookup results.
# ABOUTME: Shared by the listing, search, info, and lookup commands.

from uuid import UUID

from rich.table import Table

from homelibrary.library.types import Book, PredefinedLocation
from homelibrary.metadata.types import LookupResult

SHORT_ID_LENGTH = 8


def short_id(book_id: UUID) -> str:
    """The id prefix shown in listings and accepted by book commands."""
    return str(book_id)[:SHORT_ID_LENGTH]


def book_table(books: list[Book], locations: list[PredefinedLocation]) -> Table:
    table = Table()
    table.add_column("ID", style="dim", width=SHORT_ID_LENGTH)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Genre")
    table.add_column("Location")
    table.add_column("Fav", width=3, justify="center")

    for book in books:
        author = book.authors_display if book.has_authors else "[dim]Unknown Author[/dim]"
        table.add_row(
            short_id(book.id),
            book.title,
            author,
            book.genre or "",
            book.location_display(locations) or "",
            "[red]♥[/red]" if book.is_favorite else "",
        )
    return table


def book_detail_table(book: Book, locations: list[PredefinedLocation]) -> Table:
    """Field/value table with every populated field of a book."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", book.title)
    table.add_row("Authors", book.authors_display)
    if book.genre:
        table.add_row("Genre", book.genre)
    if book.isbn:
        table.add_row("ISBN", book.isbn)
    location = book.location_display(locations)
    if location:
        table.add_row("Location", location)
    if book.tags:
        table.add_row("Tags", ", ".join(book.tags))
    if book.notes:
        table.add_row("Notes", book.notes)
    table.add_row("Favorite", "yes" if book.is_favorite else "no")
    if book.cover_data:
        table.add_row("Cover", f"{len(book.cover_data)} bytes stored")
    elif book.cover_url:
        table.add_row("Cover", book.cover_url)
    table.add_row("Added", book.date_added.isoformat(timespec="seconds"))
    table.add_row("Modified", book.last_modified.isoformat(timespec="seconds"))
    return table


def lookup_table(result: LookupResult) -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Title", result.title)
    table.add_row("Authors", result.author or "[dim]unknown[/dim]")
    if result.genre:
        table.add_row("Genre", result.genre)
    if result.isbn:
        table.add_row("ISBN", result.isbn)
    if result.cover_url:
        table.add_row("Cover", result.cover_url)
    if result.cover_data:
        table.add_row("Cover Image", f"{len(result.cover_data)} bytes downloaded")
    table.add_row("Source", result.source)
    return table
