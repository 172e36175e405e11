"""Context-windowed literal search."""

import re

from docscan.models import SearchMatch, SearchQuery


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


class SearchEngine:
    """Scan a text buffer for every occurrence of a query.

    The scan runs once, left to right, and never overlaps: after a match at
    ``p`` of length ``L`` it resumes at ``p + L``. When whole-word matching
    rejects a candidate the scan only advances by one character, so a valid
    occurrence overlapping the rejected one is still found.

    Holds no state between calls and is safe to share.
    """

    def search(self, text: str, query: SearchQuery) -> list[SearchMatch]:
        """Find all matches of ``query`` in ``text``.

        Args:
            text: The buffer to search
            query: Query string and matching options

        Returns:
            Matches in increasing position order (empty for an empty query)
        """
        if not query.query:
            return []

        flags = 0 if query.case_sensitive else re.IGNORECASE
        pattern = re.compile(re.escape(query.query), flags)

        matches: list[SearchMatch] = []
        pos = 0
        while pos <= len(text):
            found = pattern.search(text, pos)
            if found is None:
                break

            start, end = found.span()
            if query.whole_word and not self._on_word_boundaries(text, start, end):
                pos = start + 1
                continue

            matches.append(self._build_match(text, start, end, len(matches), query))
            pos = end

        return matches

    @staticmethod
    def _on_word_boundaries(text: str, start: int, end: int) -> bool:
        """Check that neither neighbour of text[start:end] is a word character."""
        if start > 0 and _is_word_char(text[start - 1]):
            return False
        if end < len(text) and _is_word_char(text[end]):
            return False
        return True

    @staticmethod
    def _build_match(
        text: str, start: int, end: int, index: int, query: SearchQuery
    ) -> SearchMatch:
        n = query.context_length
        return SearchMatch(
            id=f"match-{index}",
            match_index=index,
            match_text=text[start:end],
            context_before=text[max(0, start - n) : start],
            context_after=text[end : min(len(text), end + n)],
            position=start,
        )


_engine = SearchEngine()


def search_text(text: str, query: SearchQuery) -> list[SearchMatch]:
    """Convenience function to search a buffer."""
    return _engine.search(text, query)
