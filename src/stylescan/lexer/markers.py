"""Marker strings recognized by the tokenizer.

Markers are the only characters the state machine reacts to. Everything
between two markers is copied verbatim into TEXT words.
"""

from __future__ import annotations

# CSS markers
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
BLOCK_COMMENT = "/*"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
SEMICOLON = ";"
URL_OPEN = "url("
ESCAPE = "\\"

# LESS/SCSS markers
PAREN_OPEN = "("
PAREN_CLOSE = ")"
LINE_COMMENT = "//"
LESS_INTERPOLATION = "@{"
SASS_INTERPOLATION = "#{"

CSS_MARKERS: tuple[str, ...] = (
    DOUBLE_QUOTE,
    SINGLE_QUOTE,
    BLOCK_COMMENT,
    BLOCK_OPEN,
    BLOCK_CLOSE,
    SEMICOLON,
    URL_OPEN,
    ESCAPE,
)

LESS_MARKERS: tuple[str, ...] = (
    PAREN_OPEN,
    PAREN_CLOSE,
    LINE_COMMENT,
    LESS_INTERPOLATION,
    SASS_INTERPOLATION,
)

# Markers matched case-insensitively (URL( and url( are the same construct)
KEYWORD_MARKERS = frozenset({URL_OPEN})

QUOTES = frozenset({DOUBLE_QUOTE, SINGLE_QUOTE})


def markers_for(less_syntax: bool) -> tuple[str, ...]:
    """Return the active marker set for a syntax mode."""
    return CSS_MARKERS + LESS_MARKERS if less_syntax else CSS_MARKERS
