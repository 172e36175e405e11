"""File sources backed by memory or the local filesystem."""

import asyncio
import mimetypes
from pathlib import Path
from typing import Optional


class InMemoryFile:
    """An uploaded file whose bytes are already in memory."""

    def __init__(self, name: str, data: bytes, mime_type: str = ""):
        self.name = name
        self.mime_type = mime_type
        self._data = data

    @property
    def size(self) -> int:
        return len(self._data)

    async def read_text(self) -> str:
        return self._data.decode("utf-8", errors="replace")

    async def read_bytes(self) -> bytes:
        return self._data


class LocalFile:
    """A file on disk.

    When no MIME type is given it is guessed from the file name, the same way
    a browser file picker would report it.
    """

    def __init__(self, path: Path | str, mime_type: Optional[str] = None):
        self.path = Path(path)
        self.name = self.path.name
        if mime_type is None:
            mime_type = mimetypes.guess_type(self.path.name)[0] or ""
        self.mime_type = mime_type

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    async def read_text(self) -> str:
        raw = await self.read_bytes()
        return raw.decode("utf-8", errors="replace")

    async def read_bytes(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)
