"""Text extractors for docscan."""

import logging
from typing import Optional

from docscan.errors import UnsupportedFileTypeError
from docscan.extractors.pdf_extractor import PDFExtractor
from docscan.extractors.text_extractor import PlainTextExtractor
from docscan.formats import resolve_file_kind
from docscan.models import Extraction, FileKind
from docscan.protocols import Extractor, FileSource

logger = logging.getLogger(__name__)

# Registry of available extractors, keyed by file kind
_EXTRACTORS: dict[FileKind, Extractor] = {}


def register_extractor(extractor: Extractor) -> None:
    """Register an extractor for every kind it handles.

    Later registrations replace earlier ones for the same kind.

    Args:
        extractor: An object implementing the Extractor protocol
    """
    for kind in extractor.kinds:
        _EXTRACTORS[kind] = extractor


def get_extractor(kind: FileKind) -> Optional[Extractor]:
    """Find the extractor for a file kind, or None."""
    return _EXTRACTORS.get(kind)


async def extract_document(
    source: FileSource, kind: Optional[FileKind] = None
) -> Extraction:
    """Extract a file's text together with format details such as page count.

    Args:
        source: The file to read
        kind: The file's kind if the caller already resolved it

    Returns:
        The extraction result

    Raises:
        UnsupportedFileTypeError: The file kind is not recognized or has no extractor
        EnvironmentUnavailableError: PDF reading is not possible here
    """
    if kind is None:
        kind = resolve_file_kind(source.mime_type, source.name)
    if kind is None:
        raise UnsupportedFileTypeError(source.mime_type, source.name)

    extractor = get_extractor(kind)
    if extractor is None:
        raise UnsupportedFileTypeError(source.mime_type, source.name)

    logger.debug(f"Extracting {source.name} as {kind.value}")
    return await extractor.extract(source)


async def extract_text(source: FileSource) -> str:
    """Extract the full text of a file as a single buffer."""
    extraction = await extract_document(source)
    return extraction.text


register_extractor(PlainTextExtractor())
register_extractor(PDFExtractor())

__all__ = [
    "PDFExtractor",
    "PlainTextExtractor",
    "extract_document",
    "extract_text",
    "get_extractor",
    "register_extractor",
]
