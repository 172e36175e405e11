"""Literal text search over extracted buffers."""

from docscan.search.engine import SearchEngine, search_text

__all__ = ["SearchEngine", "search_text"]
