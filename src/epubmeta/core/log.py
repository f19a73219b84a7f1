# ABOUTME: Logging setup for the epubmeta command line.
# ABOUTME: Routes all log records through a Rich handler on stderr.

from logging.config import dictConfig

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _stderr_handler() -> RichHandler:
    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(level: str = "WARNING") -> None:
    """Install a stderr RichHandler on the root logger at the given level."""
    level = level.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "rich": {"format": "%(name)s: %(message)s", "datefmt": "[%X]"},
            },
            "handlers": {
                "console": {
                    "()": _stderr_handler,
                    "formatter": "rich",
                    "level": level,
                }
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )
