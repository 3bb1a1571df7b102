"""Error-tolerant single-pass stylesheet tokenizer.

All marker positions are found up front. The state machine then visits them
in order, skipping markers inside constructs it already consumed (strings,
urls, comments). Text between markers is never inspected character by
character.

Thread Safety:
Tokenizer instances hold configuration and the errors of the last call.
Scan state lives in a ScanState created per call, so an instance can be
reused, but not shared between threads running at the same time.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial
from typing import Any

from stylescan.config import BuildConfig, TokenizeConfig, get_tokenize_config
from stylescan.errors import ErrorKind, ParseError
from stylescan.lexer import markers as m
from stylescan.lexer.classifiers import HeaderClassifierMixin, RuleClassifierMixin
from stylescan.lexer.handlers import (
    BlockHandlerMixin,
    CommentHandlerMixin,
    LessHandlerMixin,
    LiteralHandlerMixin,
)
from stylescan.lexer.scanners import find_all_markers
from stylescan.lexer.state import ScanState
from stylescan.tokens import Token
from stylescan.tree import build_tree
from stylescan.utils.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[[ScanState, int], None]


class Tokenizer(
    # Classifiers (pure logic, no cursor movement)
    RuleClassifierMixin,
    HeaderClassifierMixin,
    # Marker handlers
    CommentHandlerMixin,
    LiteralHandlerMixin,
    LessHandlerMixin,
    BlockHandlerMixin,
):
    """Stylesheet tokenizer.

    Usage:
        >>> tokenizer = Tokenizer(less_syntax=True, ignore_errors=False)
        >>> tokenizer.tokenize("a { color: red; }")
        [BlockStart(header='a', selectors=('a',), at_rule=None, children=None, offset=0), \
Rule(key='color', value='red', modifiers=frozenset(), offset=3, error=False), \
BlockEnd(offset=16)]
        >>> tokenizer.errors
        []

    Options can be given as a TokenizeConfig, as keyword arguments, or both;
    keyword arguments override the config. Without a config the context
    default from :func:`stylescan.config.get_tokenize_config` is used.

    """

    __slots__ = ("_config", "_errors", "_handlers", "_markers")

    def __init__(self, config: TokenizeConfig | None = None, **options: Any) -> None:
        config = config or get_tokenize_config()
        if options:
            config = config.with_options(options)
        self._config = config
        self._errors: list[ParseError] = []
        self._markers = m.markers_for(config.less_syntax)
        self._handlers: dict[str, Handler] = {
            m.DOUBLE_QUOTE: partial(self._on_quote, quote=m.DOUBLE_QUOTE),
            m.SINGLE_QUOTE: partial(self._on_quote, quote=m.SINGLE_QUOTE),
            m.BLOCK_COMMENT: self._on_block_comment,
            m.BLOCK_OPEN: self._on_block_open,
            m.BLOCK_CLOSE: self._on_block_close,
            m.SEMICOLON: self._on_semicolon,
            m.URL_OPEN: self._on_url,
            m.ESCAPE: self._on_escape,
            m.PAREN_OPEN: self._on_paren_open,
            m.PAREN_CLOSE: self._on_paren_close,
            m.LINE_COMMENT: self._on_line_comment,
            m.LESS_INTERPOLATION: self._on_interpolation,
            m.SASS_INTERPOLATION: self._on_interpolation,
        }

    @property
    def config(self) -> TokenizeConfig:
        return self._config

    @property
    def errors(self) -> list[ParseError]:
        """Errors recorded by the last tokenize() or tree() call."""
        return self._errors

    def tokenize(self, source: str) -> list[Token]:
        """Convert a stylesheet into a flat list of tokens.

        Never raises for malformed input. Problems are repaired and, unless
        ``ignore_errors`` is set, recorded in :attr:`errors`.

        Args:
            source: Stylesheet text

        Returns:
            Flat tokens with BlockStart/BlockEnd pairs
        """
        state = ScanState(source)
        for marker, offset in find_all_markers(source, self._markers):
            if offset < state.start:
                continue
            self._handlers[marker](state, offset)
        self._on_end_of_input(state)

        self._errors = state.errors
        logger.debug(
            "Tokenized %d chars into %d tokens (%d errors)",
            len(source),
            len(state.tokens),
            len(state.errors),
        )
        return state.tokens

    def tree(self, source: str) -> list[Token]:
        """Convert a stylesheet into a tree of tokens.

        Block bodies are stored in BlockStart.children and there are no
        BlockEnd tokens. Stray ``}`` add "Unmatched }" errors after the
        errors of the flat pass.
        """
        tokens = self.tokenize(source)
        results, errors = build_tree(
            tokens, source, ignore_errors=self._config.ignore_errors
        )
        self._errors.extend(errors)
        return results

    def raise_for_errors(self) -> None:
        """Raise the first error recorded by the last call, if any."""
        if self._errors:
            raise self._errors[0]

    @staticmethod
    def build(tokens: Iterable[Token], config: BuildConfig | None = None, **options: Any) -> str:
        """Render tokens back to stylesheet text.

        Shortcut for :func:`stylescan.renderers.css.build`.
        """
        from stylescan.renderers.css import build

        return build(tokens, config, **options)

    # =========================================================================
    # Error recording
    # =========================================================================

    def _record(
        self, state: ScanState, kind: ErrorKind, message: str, offset: int, *, pending: bool
    ) -> None:
        """Record an error at ``offset``.

        Nothing happens when errors are ignored. With ``pending`` the next
        statement emitted is flagged with ``error=True``.
        """
        if self._config.ignore_errors:
            return
        self._record_error(state, ParseError.at(kind, message, state.source, offset), pending=pending)

    def _record_error(self, state: ScanState, error: ParseError, *, pending: bool) -> None:
        if self._config.ignore_errors:
            return
        logger.debug("%r", error)
        state.errors.append(error)
        if pending:
            state.error = True


__all__ = ["Tokenizer"]
