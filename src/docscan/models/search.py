"""Search query options and results."""

from dataclasses import asdict, dataclass

DEFAULT_CONTEXT_LENGTH = 50


@dataclass(frozen=True)
class SearchQuery:
    """Options for a literal text search."""

    query: str
    case_sensitive: bool = False
    whole_word: bool = False
    context_length: int = DEFAULT_CONTEXT_LENGTH

    def __post_init__(self) -> None:
        if self.context_length < 0:
            raise ValueError(
                f"context_length must be >= 0, got {self.context_length}"
            )


@dataclass(frozen=True)
class SearchMatch:
    """One occurrence of a query in a text buffer."""

    id: str
    match_index: int
    match_text: str
    context_before: str
    context_after: str
    position: int  # character offset of the match start

    def to_dict(self) -> dict:
        return asdict(self)
