"""Stylesheet lexer.

The Tokenizer is assembled from mixins:

- handlers/: one method per marker, moving the scan cursor
- classifiers/: pure functions of the words of a statement
- scanners/: pure functions over the source buffer
"""

from __future__ import annotations

from stylescan.lexer.core import Tokenizer
from stylescan.lexer.state import ScanState
from stylescan.lexer.words import Word, WordKind

__all__ = [
    "ScanState",
    "Tokenizer",
    "Word",
    "WordKind",
]
