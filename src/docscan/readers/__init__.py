"""Document reader implementations."""

from docscan.readers.pypdf_reader import PypdfReader, open_pdf_reader

__all__ = ["PypdfReader", "open_pdf_reader"]
