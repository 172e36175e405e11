"""docscan - text extraction and literal search for PDF, text and Markdown files."""

from docscan.errors import (
    DocscanError,
    EnvironmentUnavailableError,
    UnsupportedFileTypeError,
)
from docscan.extractors import extract_text
from docscan.formats import resolve_file_kind
from docscan.ingest import ingest_file, ingest_path
from docscan.models import FileKind, IngestedFile, SearchMatch, SearchQuery
from docscan.search import search_text

__all__ = [
    "DocscanError",
    "EnvironmentUnavailableError",
    "FileKind",
    "IngestedFile",
    "SearchMatch",
    "SearchQuery",
    "UnsupportedFileTypeError",
    "extract_text",
    "ingest_file",
    "ingest_path",
    "resolve_file_kind",
    "search_text",
]
