"""Scanner primitives for the stylescan tokenizer.

Pure functions over an immutable source string and a start offset. They do
not touch tokenizer state, which keeps them easy to test on their own.
"""

from __future__ import annotations

from stylescan.lexer.scanners.markers import find_all_markers
from stylescan.lexer.scanners.quoted import find_end_of_quoted_string
from stylescan.lexer.scanners.url import find_end_of_url

__all__ = [
    "find_all_markers",
    "find_end_of_quoted_string",
    "find_end_of_url",
]
