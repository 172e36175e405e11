"""Protocol for per-format text extractors."""

from typing import Protocol, runtime_checkable

from docscan.models import Extraction, FileKind
from docscan.protocols.source import FileSource


@runtime_checkable
class Extractor(Protocol):
    """Turns a file of one or more kinds into a flat text buffer."""

    @property
    def kinds(self) -> tuple[FileKind, ...]:
        """Return the file kinds this extractor handles."""
        ...

    async def extract(self, source: FileSource) -> Extraction:
        """Return the text content of the source."""
        ...
