"""Data models for docscan."""

from docscan.models.document import (
    ACCEPTED_EXTENSIONS,
    ACCEPTED_FILE_TYPES,
    Extraction,
    FileKind,
    IngestedFile,
)
from docscan.models.search import DEFAULT_CONTEXT_LENGTH, SearchMatch, SearchQuery

__all__ = [
    "ACCEPTED_EXTENSIONS",
    "ACCEPTED_FILE_TYPES",
    "DEFAULT_CONTEXT_LENGTH",
    "Extraction",
    "FileKind",
    "IngestedFile",
    "SearchMatch",
    "SearchQuery",
]
