"""Extractor for plain text and Markdown files."""

from docscan.models import Extraction, FileKind
from docscan.protocols import FileSource


class PlainTextExtractor:
    """Return text and Markdown contents verbatim.

    Neither format needs structural parsing, so both share one decode path.
    """

    kinds = (FileKind.TXT, FileKind.MD)

    async def extract(self, source: FileSource) -> Extraction:
        return Extraction(text=await source.read_text())
