# ABOUTME: The `epubmeta scan` command for extracting metadata across a directory tree.
# ABOUTME: Lists every EPUB found with its title and authors, and reports unreadable files.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from epubmeta.cli.options import json_option
from epubmeta.core.scanner import ScanResult, scan_library

console = Console()


@click.command("scan")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@json_option
def scan(path: Path, json_output: bool) -> None:
    """Extract metadata from every EPUB under a directory."""
    result = scan_library(path)

    if json_output:
        _print_json(result)
        return

    _print_rich(result)


def _print_json(result: ScanResult) -> None:
    """Print scan results as JSON."""
    data = {
        "scan_root": str(result.scan_root),
        "books": [entry.metadata.to_dict() for entry in result.books],
        "failures": [
            {"path": str(entry.path), "error": entry.error}
            for entry in result.failures
        ],
    }
    click.echo(json_lib.dumps(data, indent=2))


def _print_rich(result: ScanResult) -> None:
    """Print scan results with Rich formatting."""
    if not result.entries:
        console.print(f"No EPUB files found in {escape(str(result.scan_root))}")
        return

    console.print(f"Found {len(result.entries)} EPUB file(s)\n", highlight=False)

    if result.books:
        table = Table(title="Books")
        table.add_column("File")
        table.add_column("Title", style="bold")
        table.add_column("Author")
        table.add_column("Cover")
        for entry in result.books:
            meta = entry.metadata
            table.add_row(
                escape(entry.path.name),
                escape(meta.title),
                escape(meta.author) or "[dim]unknown[/dim]",
                "yes" if meta.has_cover else "no",
            )
        console.print(table)

    if result.failures:
        console.print(
            f"\n[yellow]{len(result.failures)} file(s) could not be read:[/yellow]"
        )
        for entry in result.failures:
            console.print(
                f"  {escape(entry.path.name)}: {escape(entry.error or '')}",
                highlight=False,
            )
