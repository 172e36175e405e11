"""File kind resolution from declared MIME type and file name.

Browser and OS file pickers are unreliable for Markdown (``.md`` often comes
through as ``text/plain``), so the extension breaks the tie before falling
back to extension-only matching for missing or exotic MIME types.
"""

from typing import Callable, Optional

from docscan.models import ACCEPTED_FILE_TYPES, FileKind

# A rule looks at (mime_type, lowercased file name) and returns a kind or None.
Rule = Callable[[str, str], Optional[FileKind]]

_EXTENSION_KINDS = {
    "pdf": FileKind.PDF,
    "txt": FileKind.TXT,
    "md": FileKind.MD,
}


def _pdf_mime(mime_type: str, name: str) -> Optional[FileKind]:
    return FileKind.PDF if mime_type == ACCEPTED_FILE_TYPES[FileKind.PDF] else None


def _plain_text_mime(mime_type: str, name: str) -> Optional[FileKind]:
    if mime_type != ACCEPTED_FILE_TYPES[FileKind.TXT]:
        return None
    return FileKind.MD if name.endswith(".md") else FileKind.TXT


def _markdown_mime(mime_type: str, name: str) -> Optional[FileKind]:
    return FileKind.MD if mime_type == ACCEPTED_FILE_TYPES[FileKind.MD] else None


def _extension(mime_type: str, name: str) -> Optional[FileKind]:
    if "." not in name:
        return None
    ext = name.rsplit(".", 1)[-1]
    return _EXTENSION_KINDS.get(ext)


# Evaluated in order, first match wins.
RESOLUTION_RULES: list[Rule] = [
    _pdf_mime,
    _plain_text_mime,
    _markdown_mime,
    _extension,
]


def resolve_file_kind(mime_type: str, file_name: str) -> Optional[FileKind]:
    """Classify a file by its declared MIME type and name.

    Args:
        mime_type: MIME type reported for the file (may be empty)
        file_name: File name including extension

    Returns:
        The FileKind, or None if the type is not recognized
    """
    name = file_name.lower()
    for rule in RESOLUTION_RULES:
        kind = rule(mime_type, name)
        if kind is not None:
            return kind
    return None


def is_supported_file(mime_type: str, file_name: str) -> bool:
    """Check if a file would be accepted for ingestion."""
    return resolve_file_kind(mime_type, file_name) is not None
