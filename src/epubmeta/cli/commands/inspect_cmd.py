# ABOUTME: The `epubmeta inspect` command for viewing EPUB metadata.
# ABOUTME: Shows the extracted metadata record for a single EPUB file as a table or JSON.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from epubmeta.cli.options import json_option
from epubmeta.formats.epub import read_epub_metadata
from epubmeta.formats.errors import EpubReadError

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@json_option
def inspect(path: Path, json_output: bool) -> None:
    """Show metadata extracted from an EPUB file."""
    try:
        meta = read_epub_metadata(path)
    except EpubReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise SystemExit(1) from exc

    if json_output:
        click.echo(json_lib.dumps(meta.to_dict(), indent=2))
        return

    table = Table(title=escape(path.name), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", escape(meta.title))
    table.add_row("Author", escape(meta.author) or "[dim]unknown[/dim]")
    table.add_row("Language", escape(meta.language or "") or "[dim]unknown[/dim]")
    table.add_row("Publisher", escape(meta.publisher or "") or "[dim]unknown[/dim]")
    table.add_row("Description", escape(meta.description or "") or "[dim]none[/dim]")
    if meta.subjects:
        table.add_row("Subjects", escape(", ".join(meta.subjects)))
    table.add_row("Series", escape(meta.series or "") or "[dim]none[/dim]")
    if meta.series_index is not None:
        table.add_row("Series Index", escape(meta.series_index))
    if meta.identifiers:
        ids_str = ", ".join(f"{i.scheme}={i.value}" for i in meta.identifiers)
        table.add_row("Identifiers", escape(ids_str))
    if meta.has_cover:
        size = len(meta.cover_image)
        table.add_row("Cover", f"{escape(meta.cover_media_type)}, {size} bytes")
    elif meta.cover_media_type:
        table.add_row("Cover", f"{escape(meta.cover_media_type)}, [yellow]unreadable[/yellow]")
    else:
        table.add_row("Cover", "no")

    console.print(table)
