"""Core data models for ingested documents."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class FileKind(Enum):
    """Closed set of document formats docscan can ingest."""

    PDF = "pdf"
    TXT = "txt"
    MD = "md"


ACCEPTED_FILE_TYPES = {
    FileKind.PDF: "application/pdf",
    FileKind.TXT: "text/plain",
    FileKind.MD: "text/markdown",
}

ACCEPTED_EXTENSIONS = (".pdf", ".txt", ".md")


@dataclass(frozen=True)
class Extraction:
    """Text pulled out of one file by an extractor."""

    text: str
    page_count: Optional[int] = None  # None for formats without pages


@dataclass(frozen=True)
class IngestedFile:
    """A file whose text has been extracted."""

    id: str
    name: str
    kind: FileKind
    content: str
    size: int
    uploaded_at: datetime
    page_count: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "content": self.content,
            "size": self.size,
            "uploaded_at": self.uploaded_at.isoformat(),
            "page_count": self.page_count,
        }
