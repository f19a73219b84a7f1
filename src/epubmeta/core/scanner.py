# ABOUTME: Directory scanner that extracts metadata from every EPUB under a root.
# ABOUTME: Each file is processed independently; unreadable files are collected, not raised.

import logging
from dataclasses import dataclass, field
from pathlib import Path

from epubmeta.formats.epub import read_epub_metadata
from epubmeta.formats.errors import EpubReadError
from epubmeta.metadata.types import BookMetadata

logger = logging.getLogger(__name__)


@dataclass
class ScanEntry:
    """Outcome of extracting one EPUB: metadata on success, error text on failure."""

    path: Path
    metadata: BookMetadata | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.metadata is not None


@dataclass
class ScanResult:
    """Aggregated results from scanning a directory tree for EPUBs."""

    scan_root: Path
    entries: list[ScanEntry] = field(default_factory=list)

    @property
    def books(self) -> list[ScanEntry]:
        """Entries whose metadata was extracted."""
        return [entry for entry in self.entries if entry.ok]

    @property
    def failures(self) -> list[ScanEntry]:
        """Entries that could not be read."""
        return [entry for entry in self.entries if not entry.ok]


def find_epubs(directory: Path) -> list[Path]:
    """Recursively find all .epub files in a directory."""
    return sorted(
        path for path in directory.rglob("*") if path.is_file() and path.suffix.lower() == ".epub"
    )


def scan_library(root: Path) -> ScanResult:
    """Extract metadata from every EPUB under root.

    Args:
        root: The top-level directory to scan.

    Returns:
        A ScanResult with one entry per EPUB, in path order.
    """
    result = ScanResult(scan_root=root)
    for path in find_epubs(root):
        try:
            metadata = read_epub_metadata(path)
        except EpubReadError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            result.entries.append(ScanEntry(path=path, error=str(exc)))
            continue
        result.entries.append(ScanEntry(path=path, metadata=metadata))
    return result
