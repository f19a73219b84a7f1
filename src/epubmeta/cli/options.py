# ABOUTME: Shared Click options for epubmeta CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --json and --log-level.

import click

from epubmeta.core.log import LOG_LEVELS

log_level_option = click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="EPUBMETA_LOG_LEVEL",
    help="Logging verbosity (also read from EPUBMETA_LOG_LEVEL).",
)

json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)
