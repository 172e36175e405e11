"""FastMCP server exposing extraction and search over a folder."""

import os
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from docscan.errors import DocscanError
from docscan.formats import is_supported_file
from docscan.ingest import ingest_file
from docscan.models import ACCEPTED_EXTENSIONS, DEFAULT_CONTEXT_LENGTH, SearchQuery
from docscan.search import SearchEngine
from docscan.sources import LocalFile

SKIP_PATTERNS = {
    "__pycache__",
    "node_modules",
    ".git",
    "venv",
    ".venv",
    "dist",
    "build",
}


def list_supported_files(root: Path, path_prefix: str = "") -> list[LocalFile]:
    """Walk a folder and return the files docscan can ingest, sorted by path."""
    files = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune hidden and ignored directories in place
        dirnames[:] = [
            d for d in dirnames if not d.startswith(".") and d not in SKIP_PATTERNS
        ]
        for filename in filenames:
            if filename.startswith("."):
                continue
            if not filename.lower().endswith(ACCEPTED_EXTENSIONS):
                continue
            full_path = Path(dirpath) / filename
            rel_path = full_path.relative_to(root).as_posix()
            if not rel_path.startswith(path_prefix):
                continue
            source = LocalFile(full_path)
            if is_supported_file(source.mime_type, source.name):
                files.append(source)
    files.sort(key=lambda f: f.path)
    return files


def resolve_inside(root: Path, path: str) -> Optional[Path]:
    """Resolve a relative path, refusing anything outside the root folder."""
    root = root.resolve()
    candidate = (root / path).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate if candidate.is_file() else None


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def create_mcp_server(root: Path) -> FastMCP:
    """Create an MCP server for a folder of documents.

    Design: 1 process = 1 folder. Files are read and extracted on demand;
    nothing is cached between tool calls.

    Args:
        root: Folder whose documents are served

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="docscan",
    )
    engine = SearchEngine()

    async def load(path: str) -> str:
        file_path = resolve_inside(root, path)
        if file_path is None:
            raise FileNotFoundError(path)
        ingested = await ingest_file(LocalFile(file_path))
        return ingested.content

    @mcp.tool()
    def ls(path: str = "") -> str:
        """List the PDF, text and Markdown files in the folder.

        Args:
            path: Optional path prefix to filter results (e.g., "notes/")

        Returns:
            Formatted list of files with size information
        """
        files = list_supported_files(root, path)

        if not files:
            return f"No files found matching '{path}'"

        lines = []
        for f in files:
            rel_path = f.path.relative_to(root).as_posix()
            lines.append(f"{rel_path:<60} {format_size(f.size):>10}")

        return "\n".join(lines)

    @mcp.tool()
    async def read(path: str) -> str:
        """Read the extracted text of a document.

        Args:
            path: Path relative to the served folder (as shown in ls output)

        Returns:
            The document's full text
        """
        try:
            return await load(path)
        except FileNotFoundError:
            return f"Error: File not found: {path}"
        except DocscanError as e:
            return f"Error: {e}"

    @mcp.tool()
    async def find(
        path: str,
        query: str,
        case_sensitive: bool = False,
        whole_word: bool = False,
        context_length: int = DEFAULT_CONTEXT_LENGTH,
    ) -> str:
        """Find every occurrence of a literal string in a document.

        Args:
            path: Path relative to the served folder
            query: Exact text to look for
            case_sensitive: Match letter case exactly (default: False)
            whole_word: Only match whole words (default: False)
            context_length: Characters of context on each side (default: 50)

        Returns:
            Matches in document order, each with its offset and context
        """
        try:
            text = await load(path)
            search_query = SearchQuery(
                query=query,
                case_sensitive=case_sensitive,
                whole_word=whole_word,
                context_length=context_length,
            )
        except FileNotFoundError:
            return f"Error: File not found: {path}"
        except (DocscanError, ValueError) as e:
            return f"Error: {e}"

        matches = engine.search(text, search_query)
        if not matches:
            return f"No matches for: {query}"

        lines = []
        for m in matches:
            snippet = f"{m.context_before}[{m.match_text}]{m.context_after}"
            snippet = snippet.replace("\n", " ")
            lines.append(f"{m.match_index + 1}. @{m.position}: {snippet}")

        return "\n".join(lines)

    return mcp
