# ABOUTME: The `epubmeta cover` command for saving an EPUB's cover image.
# ABOUTME: Writes the raw cover bytes to a file named after the book and media type.

import mimetypes
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from epubmeta.formats.epub import read_epub_metadata
from epubmeta.formats.errors import EpubReadError

console = Console()

# mimetypes.guess_extension picks odd spellings for a few common types
_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/svg+xml": ".svg",
    "image/webp": ".webp",
}


def _default_output(epub_path: Path, media_type: str) -> Path:
    """Cover path beside the EPUB: book.epub + image/png -> book.png."""
    ext = _EXTENSIONS.get(media_type) or mimetypes.guess_extension(media_type) or ".img"
    return epub_path.with_suffix(ext)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the cover (default: beside the EPUB).",
)
def cover(path: Path, output: Path | None) -> None:
    """Extract the cover image from an EPUB file."""
    try:
        meta = read_epub_metadata(path)
    except EpubReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise SystemExit(1) from exc

    if not meta.has_cover:
        if meta.cover_media_type:
            console.print(
                f"[yellow]Cover listed but could not be read:[/yellow] {escape(path.name)}"
            )
        else:
            console.print(f"[yellow]No cover found:[/yellow] {escape(path.name)}")
        raise SystemExit(1)

    dest = output or _default_output(path, meta.cover_media_type)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(meta.cover_image)
    console.print(
        f"Wrote {len(meta.cover_image)} bytes to {escape(str(dest))}", highlight=False
    )
