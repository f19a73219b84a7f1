# ABOUTME: Exception hierarchy for EPUB metadata extraction.
# ABOUTME: Every fatal failure is an EpubReadError naming the archive it came from.


class EpubReadError(Exception):
    """Raised when an EPUB file cannot be read or parsed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class SourceOpenError(EpubReadError):
    """The byte source cannot be opened or is not a zip archive."""


class ArchiveMemberError(EpubReadError):
    """A member of the archive could not be read."""

    def __init__(self, message: str, *, member: str, source: str | None = None) -> None:
        super().__init__(message, source=source)
        self.member = member


class MemberNotFoundError(ArchiveMemberError):
    """The requested member does not exist in the archive."""


class MemberReadError(ArchiveMemberError):
    """The member exists but its data is corrupt or unreadable."""


class ContainerMissingError(EpubReadError):
    """META-INF/container.xml is absent or unreadable."""


class ContainerParseError(EpubReadError):
    """container.xml is malformed or names no package document."""


class PackageDocumentMissingError(EpubReadError):
    """The package document named by container.xml is not in the archive."""


class PackageDocumentParseError(EpubReadError):
    """The package document is not well-formed XML."""
