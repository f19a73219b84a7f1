# ABOUTME: Metadata package holding the record types produced by extraction.
# ABOUTME: Exports BookMetadata and Identifier used throughout epubmeta.

from epubmeta.metadata.types import UNKNOWN_TITLE, BookMetadata, Identifier

__all__ = [
    "UNKNOWN_TITLE",
    "BookMetadata",
    "Identifier",
]
