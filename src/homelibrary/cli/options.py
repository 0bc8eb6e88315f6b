# ABOUTME: Shared Click options for Home Library CLI commands.
# ABOUTME: Provides the --db option and the choice tables for sort flags.

from pathlib import Path

import click

from homelibrary.db.connection import DEFAULT_DB_PATH
from homelibrary.library.sorting import SortOption, SortOrder

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="HOMELIBRARY_DB",
    help=f"Path to library database (default: {DEFAULT_DB_PATH}, env: HOMELIBRARY_DB)",
)

SORT_CHOICES: dict[str, SortOption] = {
    "date": SortOption.DATE_ADDED,
    "title": SortOption.TITLE,
    "author": SortOption.AUTHOR,
    "genre": SortOption.GENRE,
    "location": SortOption.LOCATION,
    "favorites": SortOption.FAVORITES,
}

ORDER_CHOICES: dict[str, SortOrder] = {
    "asc": SortOrder.ASCENDING,
    "desc": SortOrder.DESCENDING,
}
