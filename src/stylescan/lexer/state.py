"""Per-call scanning state for the tokenizer.

Everything that changes while scanning lives here, so a Tokenizer instance
only holds configuration. A fresh ScanState is created for every
``tokenize()`` call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stylescan.errors import ParseError
from stylescan.lexer.words import Word, WordKind
from stylescan.tokens import Token


@dataclass(slots=True)
class ScanState:
    """Mutable state of a single scan.

    Attributes:
        source: Stylesheet source (never modified)
        start: Next unconsumed offset
        depth: Block nesting depth, may go negative on stray ``}``
        function_depth: LESS ``(`` nesting depth
        expression_depth: ``@{``/``#{`` interpolation depth
        block_start: Offset after the last ``{`` or ``}``
        selector_start: Offset after the last block boundary or ``;``
        error: An error was recorded and the next statement must carry it
        words: Words accumulated for the current statement
        function_mark: Index in ``words`` of the text before the outermost ``(``
        expression_mark: Index in ``words`` of the text ending with ``@{``
        tokens: Emitted tokens
        errors: Recorded errors

    """

    source: str
    start: int = 0
    depth: int = 0
    function_depth: int = 0
    expression_depth: int = 0
    block_start: int = 0
    selector_start: int = 0
    error: bool = False
    words: list[Word] = field(default_factory=list)
    function_mark: int | None = None
    expression_mark: int | None = None
    tokens: list[Token] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.source)

    def push_text(self, end: int, *, start: int | None = None) -> int:
        """Append ``source[start:end]`` as a TEXT word.

        Empty words are kept: the first word of a statement provides its
        offset even when the statement is blank.

        Returns:
            Index of the new word in ``words``
        """
        begin = self.start if start is None else start
        self.words.append(Word(WordKind.TEXT, self.source[begin:end], begin))
        return len(self.words) - 1

    def push_word(self, kind: WordKind, end: int, *, error: bool = False) -> None:
        """Append ``source[start:end]`` as a word and move the cursor to ``end``."""
        self.words.append(Word(kind, self.source[self.start : end], self.start, error))
        self.start = end

    def reset_statement(self) -> None:
        """Forget the words of the statement that was just emitted."""
        self.words = []
        self.function_mark = None
        self.expression_mark = None
