"""CLI entry point for docscan."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from docscan.errors import DocscanError
from docscan.ingest import ingest_file
from docscan.models import DEFAULT_CONTEXT_LENGTH, IngestedFile, SearchQuery
from docscan.search import search_text
from docscan.sources import LocalFile

logger = logging.getLogger(__name__)


def load(file: str, mime_type: Optional[str] = None) -> IngestedFile:
    """Ingest a local file, exiting with an error if it cannot be read.

    Args:
        file: Path to a PDF, text or Markdown file
        mime_type: Declared MIME type (guessed from the name if omitted)
    """
    path = Path(file)
    if not path.is_file():
        logger.error(f"File not found: {file}")
        sys.exit(1)

    try:
        return asyncio.run(ingest_file(LocalFile(path, mime_type)))
    except DocscanError as e:
        logger.error(f"Cannot process {file}: {e}")
        logger.error("Supported inputs: .pdf, .txt, .md files")
        sys.exit(1)


def extract(file: str, output: Optional[str] = None, mime_type: Optional[str] = None) -> None:
    """Print or save the extracted text of a file.

    Args:
        file: Path to the input file
        output: Optional path to write the text to instead of stdout
        mime_type: Declared MIME type override
    """
    ingested = load(file, mime_type)

    if output is None:
        sys.stdout.write(ingested.content)
        if not ingested.content.endswith("\n"):
            sys.stdout.write("\n")
        return

    Path(output).write_text(ingested.content, encoding="utf-8")
    logger.info(f"Extracted {file} -> {output}")


def search(
    file: str,
    query: str,
    case_sensitive: bool = False,
    whole_word: bool = False,
    context_length: int = DEFAULT_CONTEXT_LENGTH,
    mime_type: Optional[str] = None,
    as_json: bool = False,
) -> None:
    """Search a file for a literal string and print the matches."""
    try:
        search_query = SearchQuery(
            query=query,
            case_sensitive=case_sensitive,
            whole_word=whole_word,
            context_length=context_length,
        )
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    ingested = load(file, mime_type)
    matches = search_text(ingested.content, search_query)

    if as_json:
        print(json.dumps([m.to_dict() for m in matches], indent=2))
        return

    if not matches:
        print(f"No matches for: {query}")
        return

    for m in matches:
        snippet = f"{m.context_before}[{m.match_text}]{m.context_after}".replace("\n", " ")
        print(f"{m.match_index + 1}. @{m.position}: {snippet}")
    print(f"")
    print(f"{len(matches)} match(es) in {ingested.name}")


def info(file: str, mime_type: Optional[str] = None) -> None:
    """Show information about an ingestible file."""
    ingested = load(file, mime_type)

    print(f"File: {ingested.name}")
    print(f"  Kind: {ingested.kind.value}")
    print(f"  Size: {ingested.size / 1024:.1f} KB")
    print(f"  Characters: {len(ingested.content)}")
    if ingested.page_count is not None:
        print(f"  Pages: {ingested.page_count}")


def serve(folder: str, transport: str = "stdio") -> None:
    """Start an MCP server over a folder of documents.

    Args:
        folder: Folder to serve
        transport: Transport protocol (stdio or sse)
    """
    root = Path(folder)
    if not root.is_dir():
        logger.error(f"Folder not found: {folder}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from docscan.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {folder} via {transport}")
    mcp = create_mcp_server(root)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docscan",
        description="docscan - extract and search text in PDF, text and Markdown files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Print the extracted text of a file",
    )
    extract_parser.add_argument("file", help="Input .pdf, .txt or .md file")
    extract_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write text to this path instead of stdout",
    )
    extract_parser.add_argument("--mime", default=None, help="Declared MIME type")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Search a file for a literal string",
    )
    search_parser.add_argument("file", help="Input .pdf, .txt or .md file")
    search_parser.add_argument("query", help="Text to search for")
    search_parser.add_argument(
        "-c",
        "--case-sensitive",
        action="store_true",
        help="Match letter case exactly",
    )
    search_parser.add_argument(
        "-w",
        "--whole-word",
        action="store_true",
        help="Only match whole words",
    )
    search_parser.add_argument(
        "--context",
        type=int,
        default=DEFAULT_CONTEXT_LENGTH,
        help=f"Characters of context on each side (default: {DEFAULT_CONTEXT_LENGTH})",
    )
    search_parser.add_argument("--mime", default=None, help="Declared MIME type")
    search_parser.add_argument(
        "--json",
        action="store_true",
        help="Print matches as JSON",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about a file",
    )
    info_parser.add_argument("file", help="Input .pdf, .txt or .md file")
    info_parser.add_argument("--mime", default=None, help="Declared MIME type")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for a folder of documents",
    )
    serve_parser.add_argument("folder", help="Folder to serve")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "extract":
        extract(args.file, args.output, args.mime)
    elif args.command == "search":
        search(
            args.file,
            args.query,
            case_sensitive=args.case_sensitive,
            whole_word=args.whole_word,
            context_length=args.context,
            mime_type=args.mime,
            as_json=args.json,
        )
    elif args.command == "info":
        info(args.file, args.mime)
    elif args.command == "serve":
        serve(args.folder, args.transport)


if __name__ == "__main__":
    main()
