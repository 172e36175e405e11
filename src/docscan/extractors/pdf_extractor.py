"""Extractor for PDF documents."""

import asyncio
import logging
from typing import Callable

from docscan.models import Extraction, FileKind
from docscan.protocols import DocumentReader, FileSource
from docscan.readers import open_pdf_reader

logger = logging.getLogger(__name__)

ReaderFactory = Callable[[bytes], DocumentReader]


class PDFExtractor:
    """Rebuild a PDF's text page by page.

    Items within a page are joined with a single space, pages with a blank
    line. Pages are visited strictly in order; a failure on any page aborts
    the whole extraction.
    """

    kinds = (FileKind.PDF,)

    ITEM_SEPARATOR = " "
    PAGE_SEPARATOR = "\n\n"

    def __init__(self, reader_factory: ReaderFactory = open_pdf_reader):
        """Initialize the extractor.

        Args:
            reader_factory: Opens a byte buffer as a DocumentReader.
                            Defaults to the pypdf-backed reader.
        """
        self._reader_factory = reader_factory

    async def extract(self, source: FileSource) -> Extraction:
        data = await source.read_bytes()
        reader = await asyncio.to_thread(self._reader_factory, data)

        pages: list[str] = []
        for index in range(1, reader.page_count + 1):
            items = await reader.page_text(index)
            pages.append(
                self.ITEM_SEPARATOR.join(item if item is not None else "" for item in items)
            )
            logger.debug(f"  {source.name}: page {index}/{reader.page_count}")

        return Extraction(
            text=self.PAGE_SEPARATOR.join(pages),
            page_count=reader.page_count,
        )
