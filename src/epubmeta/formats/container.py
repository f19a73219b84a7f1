# ABOUTME: OCF container descriptor parsing.
# ABOUTME: Finds the package document (OPF) path declared in META-INF/container.xml.

from epubmeta.formats.errors import ContainerParseError
from epubmeta.formats.xmlscan import XmlScanError, scan_elements

CONTAINER_PATH = "META-INF/container.xml"


def find_package_path(container_xml: bytes) -> str:
    """Return the full-path of the first rootfile declared in container.xml.

    Raises:
        ContainerParseError: If the XML is malformed, or it ends without a
            rootfile carrying a full-path attribute.
    """
    try:
        for _event, name, element, _text in scan_elements(container_xml, events=("start",)):
            if name != "rootfile":
                continue
            full_path = element.get("full-path")
            if full_path is not None:
                return full_path
    except XmlScanError as exc:
        raise ContainerParseError(f"Error parsing container.xml: {exc}") from exc
    raise ContainerParseError("No rootfile/full-path found in container.xml")
