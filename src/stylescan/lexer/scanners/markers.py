"""Marker location scanner."""

from __future__ import annotations

import re
from collections.abc import Iterable

from stylescan.lexer.markers import KEYWORD_MARKERS


def find_all_markers(source: str, markers: Iterable[str]) -> list[tuple[str, int]]:
    """Find every occurrence of every marker, ordered by offset.

    Punctuation markers are matched literally; keyword markers such as
    ``url(`` ignore case. Occurrences of the same marker never overlap.

    The search runs once per source. When the tokenizer consumes a construct
    (a string, a comment, a url) it skips the markers that fall inside it
    instead of searching again.

    Two markers cannot start at the same offset with the current marker sets,
    but ties are still broken deterministically: longer marker first, then
    the order of ``markers``.

    Args:
        source: Stylesheet source
        markers: Marker strings to look for

    Returns:
        ``(marker, offset)`` pairs sorted by offset

    Example:
        >>> find_all_markers("a{b:URL(x)}", ["{", "}", "url("])
        [('{', 1), ('url(', 4), ('}', 10)]
    """
    found: list[tuple[int, int, int, str]] = []
    for order, marker in enumerate(markers):
        if marker in KEYWORD_MARKERS:
            # re keeps offsets intact; str.lower() can change string length
            pattern = re.compile(re.escape(marker), re.IGNORECASE)
            for match in pattern.finditer(source):
                found.append((match.start(), -len(marker), order, marker))
            continue

        step = len(marker)
        index = source.find(marker)
        while index != -1:
            found.append((index, -len(marker), order, marker))
            index = source.find(marker, index + step)

    found.sort()
    return [(marker, index) for index, _, _, marker in found]
