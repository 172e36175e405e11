"""Tests for the pypdf-backed document reader."""

import asyncio
import sys

import pytest
from pypdf.errors import PdfReadError

from docscan.errors import EnvironmentUnavailableError
from docscan.extractors import extract_document, extract_text
from docscan.readers import PypdfReader, open_pdf_reader
from docscan.sources import InMemoryFile


def test_open_reports_page_count(sample_pdf):
    reader = open_pdf_reader(sample_pdf)
    assert isinstance(reader, PypdfReader)
    assert reader.page_count == 2


def test_page_text_items(sample_pdf):
    reader = open_pdf_reader(sample_pdf)
    assert asyncio.run(reader.page_text(1)) == ["First page text"]
    assert asyncio.run(reader.page_text(2)) == ["Second page text"]


def test_page_index_is_one_based(sample_pdf):
    reader = open_pdf_reader(sample_pdf)
    with pytest.raises(IndexError):
        asyncio.run(reader.page_text(0))
    with pytest.raises(IndexError):
        asyncio.run(reader.page_text(3))


def test_extract_real_pdf(sample_pdf):
    source = InMemoryFile("paper.pdf", sample_pdf, "application/pdf")
    assert asyncio.run(extract_text(source)) == "First page text\n\nSecond page text"


def test_extract_real_pdf_reports_pages(sample_pdf):
    source = InMemoryFile("paper.pdf", sample_pdf, "application/pdf")
    assert asyncio.run(extract_document(source)).page_count == 2


def test_malformed_pdf_raises_read_error():
    source = InMemoryFile("broken.pdf", b"this is not a pdf", "application/pdf")
    with pytest.raises(PdfReadError):
        asyncio.run(extract_text(source))


def test_missing_pypdf_is_environment_unavailable(sample_pdf, monkeypatch):
    # A None entry makes "from pypdf import ..." raise ImportError.
    monkeypatch.setitem(sys.modules, "pypdf", None)
    source = InMemoryFile("paper.pdf", sample_pdf, "application/pdf")

    with pytest.raises(EnvironmentUnavailableError, match="not available"):
        asyncio.run(extract_text(source))
