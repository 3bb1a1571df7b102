"""``url(...)`` scanner."""

from __future__ import annotations

from stylescan.errors import ErrorKind, ParseError
from stylescan.lexer.markers import QUOTES, URL_OPEN
from stylescan.lexer.scanners.quoted import find_end_of_quoted_string

_WHITESPACE = frozenset(" \t\r\n")

# Characters that cannot appear in an unquoted url
_INVALID_IN_URL = frozenset("\"'(") | _WHITESPACE


def find_end_of_url(source: str, start: int) -> int:
    """Find the end of the ``url(`` construct starting at ``start``.

    Quoted urls may contain anything inside the quotes; the closing ``)``
    is the first one after the string. Unquoted urls stop at the first
    ``)`` and must not contain quotes, parentheses, whitespace or control
    characters.

    Args:
        source: Stylesheet source
        start: Offset of the ``u`` in ``url(``

    Returns:
        Offset just after the closing ``)``

    Raises:
        ParseError: UNTERMINATED_URL if the string or the url is not
            closed, INVALID_URL for forbidden characters.
    """
    length = len(source)
    index = start + len(URL_OPEN)

    while index < length and source[index] in _WHITESPACE:
        index += 1

    if index >= length:
        raise ParseError.at(ErrorKind.UNTERMINATED_URL, "Cannot find end of URL", source, start)

    char = source[index]
    if char in QUOTES:
        end = find_end_of_quoted_string(source, char, index)
        if end is None:
            raise ParseError.at(ErrorKind.UNTERMINATED_URL, "Incomplete string", source, index)
        close = source.find(")", end)
        if close == -1:
            raise ParseError.at(
                ErrorKind.UNTERMINATED_URL, "Cannot find end of URL", source, start
            )
        return close + 1

    while index < length:
        char = source[index]
        if char == ")":
            return index + 1
        if char in _INVALID_IN_URL or ord(char) < 0x20:
            raise ParseError.at(ErrorKind.INVALID_URL, "Invalid URL", source, start)
        index += 1

    raise ParseError.at(ErrorKind.UNTERMINATED_URL, "Cannot find end of URL", source, start)
