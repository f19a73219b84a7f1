# ABOUTME: CLI package for epubmeta, built on Click.
# ABOUTME: Defines the root command group, wires up logging and registers subcommands.

import click

from epubmeta.cli.commands import cover_cmd, inspect_cmd, scan_cmd
from epubmeta.cli.options import log_level_option
from epubmeta.core.log import configure_logging


@click.group()
@click.version_option(package_name="epubmeta")
@log_level_option
def cli(log_level: str) -> None:
    """epubmeta - extract metadata and covers from EPUB files."""
    configure_logging(log_level)


cli.add_command(inspect_cmd.inspect)
cli.add_command(cover_cmd.cover)
cli.add_command(scan_cmd.scan)
