# ABOUTME: Zip archive access for EPUB containers.
# ABOUTME: Opens a path or binary stream and reads members by their slash-separated names.

import logging
import zipfile
import zlib
from pathlib import Path
from typing import IO, Protocol, Union, runtime_checkable

from epubmeta.formats.errors import MemberNotFoundError, MemberReadError, SourceOpenError

logger = logging.getLogger(__name__)

EpubSource = Union[str, Path, IO[bytes]]


@runtime_checkable
class MemberReader(Protocol):
    """Protocol for reading raw member bytes out of an opened archive."""

    def read_member(self, name: str) -> bytes: ...


def describe_source(source: EpubSource) -> str:
    """Human-readable label for a source, used in log and error messages."""
    if isinstance(source, (str, Path)):
        return str(source)
    name = getattr(source, "name", None)
    return str(name) if isinstance(name, (str, Path)) else "<stream>"


class EpubArchive:
    """A zip-structured EPUB opened for reading.

    Use as a context manager so the underlying zip handle is released on
    every exit path:

        with EpubArchive.open(path) as archive:
            data = archive.read_member("META-INF/container.xml")
    """

    def __init__(self, zf: zipfile.ZipFile, label: str) -> None:
        self._zf = zf
        self.label = label

    @classmethod
    def open(cls, source: EpubSource) -> "EpubArchive":
        """Open a source as a zip archive.

        Raises:
            SourceOpenError: If the source cannot be opened or is not a zip.
        """
        label = describe_source(source)
        try:
            zf = zipfile.ZipFile(source)
        except (OSError, zipfile.BadZipFile) as exc:
            raise SourceOpenError(
                f"Failed to open EPUB as zip: {label}: {exc}", source=label
            ) from exc
        logger.debug("Opened EPUB archive: %s", label)
        return cls(zf, label)

    def read_member(self, name: str) -> bytes:
        """Return the raw bytes of the member called name.

        Raises:
            MemberNotFoundError: If no member has that name.
            MemberReadError: If the member's data is corrupt or unreadable.
        """
        try:
            return self._zf.read(name)
        except KeyError as exc:
            raise MemberNotFoundError(
                f"'{name}' not found in EPUB: {self.label}",
                member=name,
                source=self.label,
            ) from exc
        except (OSError, zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError) as exc:
            raise MemberReadError(
                f"Failed to read '{name}' from EPUB: {self.label}: {exc}",
                member=name,
                source=self.label,
            ) from exc

    def close(self) -> None:
        self._zf.close()

    def __enter__(self) -> "EpubArchive":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
