"""Protocol for PDF document readers."""

from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class DocumentReader(Protocol):
    """Per-page access to the text of an opened PDF.

    Lets the extraction logic run against pypdf or against a fake in tests.
    """

    @property
    def page_count(self) -> int:
        """Return the total number of pages."""
        ...

    async def page_text(self, index: int) -> Sequence[Optional[str]]:
        """Return the text items of a page (1-based index).

        Items without literal string content are None.
        """
        ...
