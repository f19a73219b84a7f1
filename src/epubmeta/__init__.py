# ABOUTME: epubmeta - bibliographic metadata and cover extraction for EPUB files.
# ABOUTME: Re-exports the extraction entry point and the metadata record types.

from epubmeta.formats.epub import read_epub_metadata
from epubmeta.formats.errors import EpubReadError
from epubmeta.metadata.types import BookMetadata, Identifier

__all__ = [
    "BookMetadata",
    "EpubReadError",
    "Identifier",
    "read_epub_metadata",
]
