# ABOUTME: EPUB metadata extraction pipeline: container -> package document -> cover.
# ABOUTME: Fatal problems raise EpubReadError subclasses; an unreadable cover only logs a warning.

import logging
from dataclasses import replace
from pathlib import Path

from epubmeta.formats.archive import EpubArchive, EpubSource, MemberReader
from epubmeta.formats.container import CONTAINER_PATH, find_package_path
from epubmeta.formats.errors import (
    ArchiveMemberError,
    ContainerMissingError,
    ContainerParseError,
    PackageDocumentMissingError,
    PackageDocumentParseError,
)
from epubmeta.formats.opf import find_cover_item, parse_package_metadata, resolve_member_path
from epubmeta.metadata.types import BookMetadata

logger = logging.getLogger(__name__)


def _read_cover(archive: MemberReader, cover_path: str, label: str) -> bytes | None:
    """Read the cover member, or log a CoverReadWarning and return None."""
    try:
        return archive.read_member(cover_path)
    except ArchiveMemberError as exc:
        logger.warning("CoverReadWarning: cover image '%s' unreadable in %s: %s", cover_path, label, exc)
        return None


def extract_metadata(archive: MemberReader, label: str = "<archive>") -> BookMetadata:
    """Run the extraction pipeline against an already opened archive.

    Args:
        archive: Anything that can read archive members by name.
        label: Name of the archive used in log and error messages.

    Returns:
        BookMetadata with cover bytes and media type filled in when found.

    Raises:
        ContainerMissingError: If META-INF/container.xml cannot be read.
        ContainerParseError: If container.xml names no package document.
        PackageDocumentMissingError: If the package document cannot be read.
        PackageDocumentParseError: If the package document is malformed.
    """
    try:
        container_xml = archive.read_member(CONTAINER_PATH)
    except ArchiveMemberError as exc:
        raise ContainerMissingError(
            f"{CONTAINER_PATH} missing or unreadable: {exc}", source=label
        ) from exc

    try:
        opf_path = find_package_path(container_xml)
    except ContainerParseError as exc:
        raise ContainerParseError(f"{exc}: {label}", source=label) from exc
    logger.debug("Found OPF file path: %s", opf_path)

    try:
        opf_xml = archive.read_member(opf_path)
    except ArchiveMemberError as exc:
        raise PackageDocumentMissingError(
            f"OPF file '{opf_path}' missing or unreadable: {exc}", source=label
        ) from exc

    try:
        metadata, cover_id = parse_package_metadata(opf_xml)
    except PackageDocumentParseError as exc:
        raise PackageDocumentParseError(f"{exc}: {label}", source=label) from exc

    cover_href, cover_media_type = find_cover_item(opf_xml, cover_id)
    logger.debug("Cover image path: %s, MIME type: %s", cover_href, cover_media_type)
    if cover_href is None:
        return metadata

    cover_path = resolve_member_path(opf_path, cover_href)
    cover_image = _read_cover(archive, cover_path, label)
    return replace(metadata, cover_image=cover_image, cover_media_type=cover_media_type)


def read_epub_metadata(source: EpubSource) -> BookMetadata:
    """Extract metadata and cover bytes from an EPUB file.

    Args:
        source: Path to the EPUB file, or a seekable binary file object.

    Returns:
        BookMetadata populated with extracted fields. source_path is set
        when source is a filesystem path.

    Raises:
        EpubReadError: If the file cannot be read or parsed. The concrete
            subclass names the failing stage.
    """
    with EpubArchive.open(source) as archive:
        metadata = extract_metadata(archive, archive.label)
    if isinstance(source, (str, Path)):
        metadata = replace(metadata, source_path=Path(source))
    return metadata
