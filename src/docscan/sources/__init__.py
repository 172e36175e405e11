"""Concrete file sources."""

from docscan.sources.files import InMemoryFile, LocalFile

__all__ = ["InMemoryFile", "LocalFile"]
