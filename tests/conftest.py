# ABOUTME: Shared pytest fixtures for epubmeta tests.
# ABOUTME: Builds EPUB archives by hand (exact XML control) and with ebooklib (real writer output).

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest
from ebooklib import epub

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-data\xff\xd9"
PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png-data"


def opf_document(metadata: str, manifest: str = "", version: str = "3.0") -> str:
    """Wrap metadata and manifest fragments in a package document."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="{version}" unique-identifier="uid">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
{metadata}
  </metadata>
  <manifest>
    <item id="chap01" href="chap01.xhtml" media-type="application/xhtml+xml"/>
{manifest}
  </manifest>
  <spine>
    <itemref idref="chap01"/>
  </spine>
</package>
"""


def write_epub(path: Path, members: dict[str, bytes | str]) -> Path:
    """Write a zip archive with an uncompressed mimetype entry first, then members."""
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        for name, data in members.items():
            zf.writestr(name, data, compress_type=zipfile.ZIP_DEFLATED)
    return path


@pytest.fixture
def opf_builder() -> Callable[..., str]:
    """The package document builder, for tests that write their own OPF."""
    return opf_document


@pytest.fixture
def make_epub(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: build an EPUB from an OPF string plus extra members.

    The container points at opf_path; pass container=None to omit
    META-INF/container.xml entirely.
    """

    def _make(
        opf: str | None,
        *,
        name: str = "book.epub",
        opf_path: str = "OEBPS/content.opf",
        container: str | None = CONTAINER_XML,
        extra: dict[str, bytes | str] | None = None,
    ) -> Path:
        members: dict[str, bytes | str] = {}
        if container is not None:
            members["META-INF/container.xml"] = container.format(opf_path=opf_path)
        if opf is not None:
            members[opf_path] = opf
        members.update(extra or {})
        return write_epub(tmp_path / name, members)

    return _make


@pytest.fixture
def epub3_with_cover(make_epub: Callable[..., Path]) -> Path:
    """EPUB 3 book whose cover is flagged with properties="cover-image"."""
    opf = opf_document(
        """
    <dc:identifier id="uid">urn:uuid:1b2c3d4e</dc:identifier>
    <dc:title>Dune</dc:title>
    <dc:creator>Frank Herbert</dc:creator>
    <dc:language>en</dc:language>
    <dc:publisher>Chilton Books</dc:publisher>
    <dc:subject>Science Fiction</dc:subject>
    <dc:subject>Classics</dc:subject>
    <meta property="dcterms:modified">2024-01-01T00:00:00Z</meta>
""",
        """
    <item id="img-cover" href="images/cover.jpg" media-type="image/jpeg" properties="cover-image"/>
""",
    )
    return make_epub(opf, name="dune.epub", extra={"OEBPS/images/cover.jpg": JPEG_BYTES})


@pytest.fixture
def epub2_with_cover(make_epub: Callable[..., Path]) -> Path:
    """EPUB 2 book whose cover is named by <meta name="cover">."""
    opf = opf_document(
        """
    <dc:title>The Left Hand of Darkness</dc:title>
    <dc:creator opf:role="aut">Ursula K. Le Guin</dc:creator>
    <dc:identifier opf:scheme="ISBN">9780441478125</dc:identifier>
    <meta name="cover" content="cover-id"/>
    <meta name="calibre:series" content="Hainish Cycle"/>
    <meta name="calibre:series_index" content="4.0"/>
""",
        """
    <item id="cover-id" href="cover.png" media-type="image/png"/>
""",
        version="2.0",
    )
    return make_epub(opf, name="left_hand.epub", extra={"OEBPS/cover.png": PNG_BYTES})


@pytest.fixture
def missing_cover_epub(make_epub: Callable[..., Path]) -> Path:
    """EPUB whose manifest names a cover image that is not in the archive."""
    opf = opf_document(
        """
    <dc:title>Lost Cover</dc:title>
""",
        """
    <item id="cover" href="images/missing.jpg" media-type="image/jpeg" properties="cover-image"/>
""",
    )
    return make_epub(opf, name="lost_cover.epub")


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """Create a minimal valid EPUB file with known metadata using ebooklib."""
    book = epub.EpubBook()

    book.set_identifier("test-isbn-978-0-123456-47-2")
    book.set_title("The Name of the Rose")
    book.set_language("en")
    book.add_author("Umberto Eco")

    book.add_metadata("DC", "publisher", "Harcourt")
    book.add_metadata("DC", "description", "A mystery set in a medieval monastery.")
    book.set_cover("cover.jpg", JPEG_BYTES, create_page=False)

    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    filepath = tmp_path / "name_of_the_rose.epub"
    epub.write_epub(str(filepath), book)
    return filepath


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """Create a corrupt file that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath
