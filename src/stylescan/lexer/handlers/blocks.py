"""Statement and block boundary handler mixin."""

from __future__ import annotations

from stylescan.config import TokenizeConfig
from stylescan.errors import ErrorKind
from stylescan.lexer.markers import SEMICOLON
from stylescan.lexer.state import ScanState
from stylescan.lexer.words import Word, WordKind
from stylescan.tokens import BlockEnd, BlockStart, Code


class BlockHandlerMixin:
    """Mixin handling ``;``, ``{``, ``}`` and the end of input.

    With ``split_rules`` every ``;`` ends a statement that goes through the
    rule classifier. Without it, a block body is sliced from the source as
    one Code token when the block closes.

    """

    _config: TokenizeConfig

    def _record(
        self, state: ScanState, kind: ErrorKind, message: str, offset: int, *, pending: bool
    ) -> None:
        """Record an error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _emit_statement(self, state: ScanState, extra: str = "") -> None:
        """Classify the current words as a rule. Implemented by RuleClassifierMixin."""
        raise NotImplementedError

    def _classify_header(self, words: list[Word]) -> BlockStart:
        """Classify a block header. Implemented by HeaderClassifierMixin."""
        raise NotImplementedError

    def _merge_nested(
        self, state: ScanState, offset: int, kind: WordKind, mark: int | None
    ) -> None:
        """Merge words into one nested word. Implemented by LessHandlerMixin."""
        raise NotImplementedError

    def _on_semicolon(self, state: ScanState, offset: int) -> None:
        """End a statement, unless inside LESS function arguments."""
        if state.function_depth > 0:
            return
        if self._config.split_rules:
            state.push_text(offset)
            self._emit_statement(state, SEMICOLON)
            state.error = False
        state.selector_start = state.start = offset + 1
        state.reset_statement()

    def _on_block_open(self, state: ScanState, offset: int) -> None:
        """Emit the header before ``{`` as a BlockStart."""
        if not self._config.split_rules and state.selector_start > state.block_start:
            self._emit_code(state, state.block_start, state.selector_start)

        state.push_text(offset)
        state.tokens.append(self._classify_header(state.words))

        state.block_start = state.selector_start = state.start = offset + 1
        state.reset_statement()
        state.depth += 1

    def _on_block_close(self, state: ScanState, offset: int) -> None:
        """Close an interpolation or a block."""
        if state.expression_depth > 0:
            if state.expression_depth == 1:
                self._merge_nested(state, offset, WordKind.EXPRESSION, state.expression_mark)
                state.expression_mark = None
            state.expression_depth -= 1
            return

        self._flush_statement(state, offset)
        state.tokens.append(BlockEnd(offset=offset))

        if state.depth == 0:
            self._record(
                state, ErrorKind.UNEXPECTED_BLOCK_END, "Unexpected }", offset, pending=False
            )
        state.depth -= 1

        state.block_start = state.selector_start = state.start = offset + 1
        state.reset_statement()
        state.function_depth = 0

    def _on_end_of_input(self, state: ScanState) -> None:
        """Report unclosed blocks and flush the trailing statement."""
        if state.depth > 0:
            self._record(
                state, ErrorKind.MISSING_BLOCK_END, "Missing }", state.length, pending=False
            )
        self._flush_statement(state, state.length)
        state.start = state.length
        state.reset_statement()

    def _flush_statement(self, state: ScanState, end: int) -> None:
        """Emit whatever was accumulated since the last boundary."""
        if self._config.split_rules:
            state.push_text(end)
            self._emit_statement(state)
        else:
            self._emit_code(state, state.block_start, end)
        state.error = False

    def _emit_code(self, state: ScanState, start: int, end: int) -> None:
        """Emit ``source[start:end]`` as Code, unless it is blank."""
        code = state.source[start:end].strip()
        if not code:
            return
        state.tokens.append(Code(text=code, offset=start, error=state.error))
        state.error = False
