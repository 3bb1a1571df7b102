"""Comment handler mixin."""

from __future__ import annotations

from stylescan.errors import ErrorKind
from stylescan.lexer.state import ScanState


class CommentHandlerMixin:
    """Mixin skipping ``/* ... */`` and LESS ``// ...`` comments.

    Comment text never becomes part of a word, so comments disappear from
    rules and headers. Unsplit block bodies keep them because those are
    sliced straight from the source.

    """

    def _record(
        self, state: ScanState, kind: ErrorKind, message: str, offset: int, *, pending: bool
    ) -> None:
        """Record an error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _on_line_comment(self, state: ScanState, offset: int) -> None:
        """Skip to the end of the line, newline included."""
        state.push_text(offset)
        source = state.source
        ends = [i for i in (source.find("\n", offset + 2), source.find("\r", offset + 2)) if i != -1]
        state.start = min(ends) + 1 if ends else state.length

    def _on_block_comment(self, state: ScanState, offset: int) -> None:
        """Skip to the end of the comment, or to the end of input if it never closes."""
        state.push_text(offset)
        end = state.source.find("*/", offset + 2)
        if end == -1:
            self._record(
                state,
                ErrorKind.UNTERMINATED_COMMENT,
                "Missing comment closing statement",
                offset,
                pending=True,
            )
            state.start = state.length
            return
        state.start = end + 2
