"""Quoted string scanner."""

from __future__ import annotations


def find_end_of_quoted_string(source: str, quote: str, start: int) -> int | None:
    """Find the end of the quoted string opened at ``start``.

    A quote preceded by a backslash is escaped, unless that backslash is
    itself escaped: in ``"a\\\\"`` the string ends at the last quote.

    Args:
        source: Stylesheet source
        quote: Quote character (``"`` or ``'``)
        start: Offset of the opening quote

    Returns:
        Offset just after the closing quote, or None if the string is not
        closed before the end of the source.

    Example:
        >>> find_end_of_quoted_string('x = "a\\\\"b" + 1', '"', 4)
        10
    """
    end = source.find(quote, start + 1)
    if end == -1:
        return None

    next_escape = source.find("\\", start + 1)
    while next_escape != -1 and next_escape < end:
        if end == next_escape + 1:
            end = source.find(quote, end + 1)
            if end == -1:
                return None
        # An escape consumes the character after it
        next_escape = source.find("\\", next_escape + 2)

    return end + 1
