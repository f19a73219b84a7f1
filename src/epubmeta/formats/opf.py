# ABOUTME: OPF package document parsing: metadata fields, cover lookup and cover path resolution.
# ABOUTME: Streams the document with namespace-agnostic element matching; no tree is built.

import logging
import posixpath

from epubmeta.formats.errors import PackageDocumentParseError
from epubmeta.formats.xmlscan import XmlScanError, local_attrs, scan_elements
from epubmeta.metadata.types import UNKNOWN_TITLE, BookMetadata, Identifier

logger = logging.getLogger(__name__)

_SERIES_META = "calibre:series"
_SERIES_INDEX_META = "calibre:series_index"


def parse_package_metadata(opf_xml: bytes) -> tuple[BookMetadata, str | None]:
    """Extract bibliographic fields from the <metadata> section of an OPF.

    Only elements inside <metadata> are read, so same-named elements in the
    manifest or elsewhere are ignored. Repeated scalar fields (title,
    description, publisher, language) keep the last value seen. Creators,
    subjects and identifiers accumulate in document order. Text spoiled by an
    undeclared entity (such as &nbsp; without a DTD) reads as "".

    Args:
        opf_xml: Raw bytes of the package document.

    Returns:
        (metadata, cover_id) where cover_id is the manifest item id named by
        <meta name="cover" content="..."/>, or None.

    Raises:
        PackageDocumentParseError: If the document is not well-formed XML.
    """
    in_metadata = False
    title: str | None = None
    scalars: dict[str, str] = {}
    authors: list[str] = []
    subjects: list[str] = []
    identifiers: list[Identifier] = []
    cover_id: str | None = None
    series: str | None = None
    series_index: str | None = None

    try:
        for event, name, element, text in scan_elements(opf_xml):
            if name == "metadata":
                in_metadata = event == "start"
                continue
            if not in_metadata:
                continue

            # meta carries its value in attributes, which are complete at start
            if name == "meta":
                if event != "start":
                    continue
                attrs = local_attrs(element)
                meta_name = attrs.get("name")
                content = attrs.get("content")
                if meta_name is None or content is None:
                    continue
                if meta_name == "cover":
                    cover_id = content
                elif meta_name == _SERIES_META:
                    series = content
                elif meta_name == _SERIES_INDEX_META:
                    series_index = content
                continue

            # text-valued elements are complete only at their end event
            if event != "end":
                continue
            if text is None:
                continue
            if name == "title":
                title = text
            elif name == "creator":
                authors.append(text)
            elif name in ("description", "publisher", "language"):
                scalars[name] = text
            elif name == "identifier":
                scheme = local_attrs(element).get("scheme")
                identifiers.append(Identifier.from_text(text, scheme=scheme))
            elif name == "subject" and text:
                subjects.append(text)
    except XmlScanError as exc:
        raise PackageDocumentParseError(f"Error parsing OPF: {exc}") from exc

    metadata = BookMetadata(
        title=title if title is not None else UNKNOWN_TITLE,
        authors=authors,
        description=scalars.get("description"),
        publisher=scalars.get("publisher"),
        language=scalars.get("language"),
        subjects=subjects,
        series=series,
        series_index=series_index,
        identifiers=identifiers,
    )
    return metadata, cover_id


def find_cover_item(
    opf_xml: bytes, cover_id: str | None
) -> tuple[str | None, str | None]:
    """Find the manifest item holding the cover image.

    Only image/* items qualify. The first qualifying item in document order
    wins, where an item qualifies if its properties mention cover-image
    (EPUB 3) or its id equals cover_id (EPUB 2). Per item the properties
    rule is checked first.

    Returns:
        (href, media_type) of the cover item, or (None, None) if there is none.

    Raises:
        PackageDocumentParseError: If the document is not well-formed XML.
    """
    try:
        for _event, name, element, _text in scan_elements(opf_xml, events=("start",)):
            if name != "item":
                continue
            href = element.get("href")
            media_type = element.get("media-type")
            if href is None or media_type is None:
                continue
            if not media_type.startswith("image/"):
                continue
            properties = element.get("properties")
            if properties is not None and "cover-image" in properties:
                return href, media_type
            if cover_id is not None and element.get("id") == cover_id:
                return href, media_type
    except XmlScanError as exc:
        raise PackageDocumentParseError(
            f"Error parsing manifest for cover: {exc}"
        ) from exc
    logger.debug("No cover item found in manifest (cover id: %s)", cover_id)
    return None, None


def resolve_member_path(package_path: str, href: str) -> str:
    """Resolve a manifest href against the package document's directory.

    Archive member names are always slash-separated. '..' segments are not
    collapsed.

    >>> resolve_member_path("OEBPS/content.opf", "images/cover.jpg")
    'OEBPS/images/cover.jpg'
    """
    base = posixpath.dirname(package_path.replace("\\", "/"))
    return posixpath.join(base, href.replace("\\", "/"))
