"""LESS/SCSS nesting handler mixin.

Handles ``(`` ``)`` function nesting and ``@{`` / ``#{`` interpolation.
While a function is open, ``;`` does not end the statement, so mixin calls
such as ``.mixin(@a: 1; @b: 2);`` stay in one piece. When the outermost
``)`` or interpolation ``}`` is reached, the words since the opening marker
are merged into a single FUNCTION or EXPRESSION word that the classifiers
treat as opaque.
"""

from __future__ import annotations

from stylescan.lexer.state import ScanState
from stylescan.lexer.words import Word, WordKind


class LessHandlerMixin:
    """Mixin providing LESS function and interpolation handling."""

    def _on_paren_open(self, state: ScanState, offset: int) -> None:
        """Open a function; the outermost ``(`` saves a merge mark."""
        index = state.push_text(offset)
        if state.function_depth == 0:
            state.function_mark = index
        state.start = offset
        state.function_depth += 1

    def _on_paren_close(self, state: ScanState, offset: int) -> None:
        """Close a function; the outermost ``)`` merges its words."""
        if state.function_depth == 1:
            self._merge_nested(state, offset, WordKind.FUNCTION, state.function_mark)
            state.function_mark = None
        state.function_depth = max(state.function_depth - 1, 0)

    def _on_interpolation(self, state: ScanState, offset: int) -> None:
        """Open ``@{`` or ``#{``; the marker stays in the TEXT word before the expression."""
        index = state.push_text(offset + 2)
        if state.expression_depth == 0:
            state.expression_mark = index
        state.start = offset + 2
        state.expression_depth += 1

    def _merge_nested(
        self, state: ScanState, offset: int, kind: WordKind, mark: int | None
    ) -> None:
        """Replace the words after ``mark`` and the text up to ``offset`` with one word.

        The closing character is included. Without a mark (it was dropped at
        a statement boundary) every accumulated word is merged and the result
        is flagged as an error.
        """
        tail = state.source[state.start : offset + 1]
        words = state.words

        if mark is None or mark >= len(words):
            merged_from = 0
            error = True
        else:
            merged_from = mark + 1
            error = False

        merged = words[merged_from:]
        start = merged[0].offset if merged else state.start
        text = "".join(word.text for word in merged) + tail
        del words[merged_from:]
        words.append(Word(kind, text, start, error))
        state.start = offset + 1
