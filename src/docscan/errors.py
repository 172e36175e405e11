"""Exceptions raised by docscan."""


class DocscanError(Exception):
    """Base class for docscan failures."""


class UnsupportedFileTypeError(DocscanError):
    """Neither the MIME type nor the file extension maps to a known kind."""

    def __init__(self, mime_type: str, file_name: str = ""):
        self.mime_type = mime_type
        self.file_name = file_name
        super().__init__(f"Unsupported file type: {mime_type or '(none)'}")


class EnvironmentUnavailableError(DocscanError):
    """The current environment cannot run the PDF document reader."""
