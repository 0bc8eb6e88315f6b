# ABOUTME: CLI package for Home Library, built on Click.
# ABOUTME: Defines the root command group and its process-wide setup, and registers subcommands.

import locale
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from homelibrary.cli.commands import (
    add_cmd,
    edit_cmd,
    fav_cmd,
    info_cmd,
    location_cmd,
    lookup_cmd,
    ls_cmd,
    rm_cmd,
    scan_cmd,
    search_cmd,
    settings_cmd,
    tag_cmd,
)

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="homelibrary")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Home Library - catalog the books you own."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("Collation locale from the environment is unavailable; using C")
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[
                RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
            ],
        )


cli.add_command(add_cmd.add)
cli.add_command(edit_cmd.edit)
cli.add_command(fav_cmd.fav)
cli.add_command(info_cmd.info)
cli.add_command(location_cmd.location)
cli.add_command(lookup_cmd.lookup)
cli.add_command(ls_cmd.ls)
cli.add_command(rm_cmd.rm)
cli.add_command(scan_cmd.scan)
cli.add_command(search_cmd.search)
cli.add_command(settings_cmd.settings)
cli.add_command(tag_cmd.tag)
