"""Protocol definitions for extensible components."""

from docscan.protocols.extractor import Extractor
from docscan.protocols.reader import DocumentReader
from docscan.protocols.source import FileSource

__all__ = ["DocumentReader", "Extractor", "FileSource"]
