"""Protocol for file inputs."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSource(Protocol):
    """A file handed to docscan for ingestion.

    Mirrors what a browser or upload form gives you: a declared MIME type,
    a file name, a byte size and access to the contents.
    """

    @property
    def name(self) -> str:
        """Return the display file name (e.g., 'notes.md')."""
        ...

    @property
    def mime_type(self) -> str:
        """Return the declared MIME type, or an empty string if unknown."""
        ...

    @property
    def size(self) -> int:
        """Return the size of the contents in bytes."""
        ...

    async def read_text(self) -> str:
        """Return the full contents decoded as text."""
        ...

    async def read_bytes(self) -> bytes:
        """Return the full contents as raw bytes."""
        ...
