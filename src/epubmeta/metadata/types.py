# ABOUTME: Core metadata data structures for extracted EPUB metadata.
# ABOUTME: BookMetadata is the record handed back to callers; Identifier is a scheme/value pair.

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

UNKNOWN_TITLE = "Unknown Title"

_ISBN_SCHEMES = frozenset({"isbn", "isbn10", "isbn-10", "isbn13", "isbn-13"})


@dataclass(frozen=True)
class Identifier:
    """A book identifier such as an ISBN, UUID or publisher-specific id."""

    scheme: str
    value: str

    @classmethod
    def from_text(cls, text: str, scheme: str | None = None) -> "Identifier":
        """Build an Identifier from dc:identifier text.

        An explicit scheme wins and the text is kept untouched. Otherwise the
        text is split on its first colon ("isbn:123" -> isbn/123). Text without
        a colon gets the scheme "unknown".
        """
        if scheme is not None:
            return cls(scheme=scheme, value=text)
        prefix, sep, rest = text.partition(":")
        if sep:
            return cls(scheme=prefix, value=rest)
        return cls(scheme="unknown", value=text)


@dataclass
class BookMetadata:
    """Metadata extracted from a single EPUB package document.

    Cover bytes are only ever set together with a cover media type. The
    reverse is allowed: the manifest may name a cover that could not be read
    from the archive, leaving cover_media_type set and cover_image None.
    """

    title: str = UNKNOWN_TITLE
    authors: list[str] = field(default_factory=list)
    description: str | None = None
    publisher: str | None = None
    language: str | None = None
    subjects: list[str] = field(default_factory=list)
    series: str | None = None
    series_index: str | None = None
    identifiers: list[Identifier] = field(default_factory=list)
    cover_image: bytes | None = None
    cover_media_type: str | None = None
    source_path: Path | None = None

    def __post_init__(self) -> None:
        if self.cover_image is not None and self.cover_media_type is None:
            raise ValueError("cover_image requires a cover_media_type")

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    @property
    def has_cover(self) -> bool:
        """Whether cover image data is present."""
        return self.cover_image is not None and len(self.cover_image) > 0

    @property
    def isbn(self) -> str | None:
        """The first identifier carrying an ISBN scheme, if any."""
        for identifier in self.identifiers:
            if identifier.scheme.lower() in _ISBN_SCHEMES:
                return identifier.value
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping. Cover bytes are reported by size only."""
        return {
            "title": self.title,
            "authors": list(self.authors),
            "description": self.description,
            "publisher": self.publisher,
            "language": self.language,
            "subjects": list(self.subjects),
            "series": self.series,
            "series_index": self.series_index,
            "identifiers": [
                {"scheme": ident.scheme, "value": ident.value}
                for ident in self.identifiers
            ],
            "cover": {
                "media_type": self.cover_media_type,
                "size": len(self.cover_image) if self.cover_image is not None else None,
            },
            "source_path": str(self.source_path) if self.source_path else None,
        }
