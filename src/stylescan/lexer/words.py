"""Words: transient scanning units accumulated between statement boundaries.

A word is a slice of the source that the classifiers treat as a unit. Only
TEXT words are searched for ``:`` and ``,`` separators. Quoted strings, urls,
LESS function calls and interpolations are opaque.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto


class WordKind(Enum):
    """Kinds of words produced by the scanner."""

    TEXT = auto()  # Plain text, may contain separators
    STRING = auto()  # "..." or '...'
    URL = auto()  # url(...)
    FUNCTION = auto()  # (...) after a LESS mixin/function name
    EXPRESSION = auto()  # body of @{...} / #{...}


@dataclass(frozen=True, slots=True)
class Word:
    """A slice of source text with its kind.

    Attributes:
        kind: Word kind
        text: Raw text (comments already removed)
        offset: Absolute start offset in source
        error: Set for words produced by error recovery

    """

    kind: WordKind
    text: str
    offset: int
    error: bool = False

    @property
    def is_text(self) -> bool:
        return self.kind is WordKind.TEXT


def merge_words(words: Iterable[Word]) -> str:
    """Join word texts and strip surrounding whitespace."""
    return "".join(word.text for word in words).strip()
