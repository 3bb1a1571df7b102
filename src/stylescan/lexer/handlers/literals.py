"""Escape, string and url handler mixin."""

from __future__ import annotations

from stylescan.config import TokenizeConfig
from stylescan.errors import ErrorKind, ParseError
from stylescan.lexer.scanners import find_end_of_quoted_string, find_end_of_url
from stylescan.lexer.state import ScanState
from stylescan.lexer.words import Word, WordKind


class LiteralHandlerMixin:
    """Mixin for constructs whose content must not be scanned for markers.

    Strings and urls may contain ``;``, ``{`` and ``}``. Once the end of the
    construct is known the cursor jumps past it, and every marker inside is
    skipped by the main loop.

    """

    _config: TokenizeConfig

    def _record(
        self, state: ScanState, kind: ErrorKind, message: str, offset: int, *, pending: bool
    ) -> None:
        """Record an error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _record_error(self, state: ScanState, error: ParseError, *, pending: bool) -> None:
        """Record a prebuilt error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _on_escape(self, state: ScanState, offset: int) -> None:
        """Keep the backslash and the escaped character in a TEXT word."""
        end = min(offset + 2, state.length)
        state.push_word(WordKind.TEXT, end)

    def _on_url(self, state: ScanState, offset: int) -> None:
        """Capture ``url(...)`` as one URL word.

        On failure only the letters ``url`` are consumed, so scanning resumes
        at the ``(``.
        """
        state.push_text(offset)
        state.start = offset
        try:
            end = find_end_of_url(state.source, offset)
        except ParseError as exc:
            state.push_word(WordKind.TEXT, offset + 3)
            self._record_error(state, exc, pending=True)
            return
        state.push_word(WordKind.URL, end)

    def _on_quote(self, state: ScanState, offset: int, quote: str) -> None:
        """Capture a quoted string as one STRING word.

        An unclosed quote either becomes a one-character TEXT word (errors
        ignored) or swallows the rest of the input as an error word.
        """
        state.push_text(offset)
        state.start = offset
        end = find_end_of_quoted_string(state.source, quote, offset)
        if end is not None:
            state.push_word(WordKind.STRING, end)
            return

        if self._config.ignore_errors:
            state.push_word(WordKind.TEXT, offset + 1)
            return

        self._record(
            state, ErrorKind.UNTERMINATED_STRING, f"Missing closing {quote}", offset, pending=True
        )
        state.words.append(Word(WordKind.TEXT, state.source[offset:], offset, error=True))
        state.start = state.length
