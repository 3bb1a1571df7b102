"""Exception classes for stylescan.

Tokenizing never raises for malformed stylesheets: problems are collected as
ParseError instances on the Tokenizer and returned alongside the tokens.
ParseError is still an Exception so scanner primitives can raise it
internally and callers can re-raise collected errors if they want to.
"""

from __future__ import annotations

from enum import Enum, auto


class StylescanError(Exception):
    """Base exception for all stylescan errors.

    Subclass this for specific error categories.
    """

    pass


class ErrorKind(Enum):
    """Categories of recoverable stylesheet errors."""

    UNTERMINATED_COMMENT = auto()  # /* without */
    UNTERMINATED_URL = auto()  # url( without )
    INVALID_URL = auto()  # whitespace, quote or control char in bare url()
    UNTERMINATED_STRING = auto()  # " or ' without closing quote
    INVALID_RULE = auto()  # statement is neither a declaration nor a header
    UNEXPECTED_BLOCK_END = auto()  # } with no open block
    MISSING_BLOCK_END = auto()  # open blocks at end of input
    UNMATCHED_BLOCK_END = auto()  # leftover } found while building the tree


class ParseError(StylescanError):
    """Recoverable error found while tokenizing a stylesheet.

    The formatted message follows the "<message> on line <n>" convention,
    for example ``Missing } on line 1``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        offset: int | None = None,
        lineno: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            kind: Error category
            message: Error description without location
            offset: Offset in the source where the error was detected
            lineno: Line number (1-indexed) the error points at
        """
        self.kind = kind
        self.message = message
        self.offset = offset
        self.lineno = lineno

        location = f" on line {lineno}" if lineno is not None else ""
        super().__init__(f"{message}{location}")

    @classmethod
    def at(cls, kind: ErrorKind, message: str, source: str, offset: int) -> ParseError:
        """Create an error pointing at ``offset`` in ``source``.

        The line number is resolved with :func:`stylescan.location.line_at`,
        so it points at the next non-blank character.
        """
        from stylescan.location import line_at

        return cls(kind, message, offset=offset, lineno=line_at(source, offset))

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {str(self)!r})"


class BuildError(StylescanError):
    """Error while rendering tokens back to text.

    Raised when the renderer receives an object that is not a token.
    """

    pass
