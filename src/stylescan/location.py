"""Source location tracking for error messages.

Tokens only store their absolute offset. Line numbers are resolved on demand
because they are only needed when an error is reported.
"""

from __future__ import annotations

# Characters skipped before counting lines
_LEADING_BLANKS = " \t\n\r\0\x0b"


def line_at(source: str, offset: int) -> int:
    """Return the 1-indexed line of the first non-blank character at or after offset.

    Skipping blanks first makes an offset taken right after a ``;`` or ``{``
    point at the line of the statement that follows it, not at the end of
    the previous line.

    Args:
        source: Stylesheet source
        offset: Absolute offset (clamped to the source bounds)

    Returns:
        Line number, starting at 1

    Example:
        >>> line_at("a {\\n  color: red;\\n}", 3)
        2
    """
    offset = max(0, min(offset, len(source)))
    remaining = source[offset:]
    end = offset + len(remaining) - len(remaining.lstrip(_LEADING_BLANKS))
    return source.count("\n", 0, end) + 1


__all__ = ["line_at"]
