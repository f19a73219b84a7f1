# ABOUTME: Pull-style XML event scanning with namespace-agnostic element names.
# ABOUTME: Thin wrapper over lxml iterparse shared by the container and OPF readers.

from collections.abc import Iterator
from io import BytesIO
from typing import NamedTuple

from lxml import etree

# Recoverable problems seen in real-world EPUBs: HTML entities such as &nbsp;
# without a DTD, and dc:/opf: prefixes used without an xmlns declaration.
_ENTITY_ERRORS = frozenset({"ERR_UNDECLARED_ENTITY", "WAR_UNDECLARED_ENTITY"})
_TOLERATED_ERRORS = _ENTITY_ERRORS | {"NS_ERR_UNDEFINED_NAMESPACE"}


class XmlScanError(Exception):
    """Raised when the scanned document is not well-formed XML."""


class XmlEvent(NamedTuple):
    """One scanned element event.

    text is only filled on end events: the element's stripped leading text,
    None when it has none, or "" when that text held an undeclared entity.
    """

    event: str
    name: str
    element: etree._Element
    text: str | None = None


def local_name(name: str) -> str:
    """Strip a namespace or prefix: '{ns}title' and 'dc:title' both -> 'title'."""
    return name.rpartition("}")[2].rpartition(":")[2]


def local_attrs(element: etree._Element) -> dict[str, str]:
    """Element attributes keyed by local name, so opf:scheme and scheme both read as 'scheme'."""
    return {local_name(key): value for key, value in element.attrib.items()}


def _is_fatal(entry: etree._LogEntry) -> bool:
    return entry.level >= etree.ErrorLevels.ERROR and entry.type_name not in _TOLERATED_ERRORS


def _element_text(element: etree._Element, entity_lines: set[int]) -> str | None:
    """Stripped leading text of an element, "" if an undeclared entity broke it."""
    raw = element.text or ""
    first = element.sourceline
    if first is not None and entity_lines:
        last = first + raw.count("\n")
        if any(first <= line <= last for line in entity_lines):
            return ""
    return raw.strip() or None


def scan_elements(
    data: bytes, events: tuple[str, ...] = ("start", "end")
) -> Iterator[XmlEvent]:
    """Yield an XmlEvent for each element in document order.

    The parser runs in recovery mode. Undeclared entities and undeclared
    namespace prefixes are tolerated; any other error raises once the scan
    reaches the end of the document. Elements are cleared once their end
    event has been consumed, so the whole tree is never held in memory.
    Entity expansion and network access are disabled.

    Raises:
        XmlScanError: If the document is not well-formed XML.
    """
    context = etree.iterparse(
        BytesIO(data),
        events=("start", "end"),
        recover=True,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        for event, element in context:
            if not isinstance(element.tag, str):
                continue
            if event in events:
                text = None
                if event == "end":
                    entity_lines = {
                        entry.line
                        for entry in context.error_log
                        if entry.type_name in _ENTITY_ERRORS
                    }
                    text = _element_text(element, entity_lines)
                yield XmlEvent(event, local_name(element.tag), element, text)
            if event == "end":
                element.clear(keep_tail=True)
        fatal = [entry for entry in context.error_log if _is_fatal(entry)]
    except etree.XMLSyntaxError as exc:
        raise XmlScanError(str(exc)) from exc
    if fatal:
        raise XmlScanError(f"{fatal[0].message} (line {fatal[0].line})")
