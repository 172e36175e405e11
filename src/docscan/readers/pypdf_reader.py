"""pypdf-backed document reader."""

import asyncio
import io
import logging

from docscan.errors import EnvironmentUnavailableError

logger = logging.getLogger(__name__)


class PypdfReader:
    """Document reader over a pypdf ``PdfReader``.

    Text items are collected through pypdf's ``visitor_text`` hook, one item
    per text-showing operation on the page.
    """

    def __init__(self, pdf):
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    async def page_text(self, index: int) -> list[str]:
        """Return the text items of a page (1-based index)."""
        if not 1 <= index <= self.page_count:
            raise IndexError(f"Page {index} out of range 1..{self.page_count}")
        return await asyncio.to_thread(self._collect_items, index - 1)

    def _collect_items(self, page_number: int) -> list[str]:
        items: list[str] = []

        def visitor(text, cm, tm, font_dict, font_size):
            # pypdf also calls back with "" when it flushes on font or position changes
            if text:
                items.append(text)

        self._pdf.pages[page_number].extract_text(visitor_text=visitor)
        return items


def open_pdf_reader(data: bytes) -> PypdfReader:
    """Open a PDF byte buffer for reading.

    Raises:
        EnvironmentUnavailableError: pypdf cannot be loaded here
        pypdf.errors.PdfReadError: the buffer is not a readable PDF
    """
    # Import here so text-only environments never load the PDF stack
    try:
        from pypdf import PdfReader
    except ImportError as e:
        raise EnvironmentUnavailableError(
            "PDF extraction is not available in this environment "
            "(install pypdf or try a different environment)"
        ) from e

    pdf = PdfReader(io.BytesIO(data))
    logger.debug(f"Opened PDF with {len(pdf.pages)} pages")
    return PypdfReader(pdf)
