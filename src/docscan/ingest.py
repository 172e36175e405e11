"""Ingestion pipeline: classify a file, extract its text, wrap the result."""

import logging
import uuid
from datetime import datetime
from pathlib import Path

from docscan.errors import UnsupportedFileTypeError
from docscan.extractors import extract_document
from docscan.formats import resolve_file_kind
from docscan.models import IngestedFile
from docscan.protocols import FileSource
from docscan.sources import LocalFile

logger = logging.getLogger(__name__)


async def ingest_file(source: FileSource) -> IngestedFile:
    """Turn an uploaded file into an IngestedFile.

    Extraction is all-or-nothing: any failure propagates and no partial
    result is produced.
    """
    kind = resolve_file_kind(source.mime_type, source.name)
    if kind is None:
        raise UnsupportedFileTypeError(source.mime_type, source.name)

    extraction = await extract_document(source, kind)
    content = extraction.text

    ingested = IngestedFile(
        id=uuid.uuid4().hex,
        name=source.name,
        kind=kind,
        content=content,
        size=source.size,
        uploaded_at=datetime.now(),
        page_count=extraction.page_count,
    )
    logger.info(f"Ingested {ingested.name} ({kind.value}, {len(content)} chars)")
    return ingested


async def ingest_path(path: Path | str) -> IngestedFile:
    """Ingest a file from the local filesystem."""
    return await ingest_file(LocalFile(path))
