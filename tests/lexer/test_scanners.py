"""Tests for the scanner primitives.

Scanners are pure functions over the source string, so they are tested
directly without a Tokenizer.
"""

import pytest

from stylescan.errors import ErrorKind, ParseError
from stylescan.lexer.markers import CSS_MARKERS, LESS_MARKERS, markers_for
from stylescan.lexer.scanners import (
    find_all_markers,
    find_end_of_quoted_string,
    find_end_of_url,
)


class TestFindAllMarkers:
    """Marker search and ordering."""

    def test_sorted_by_offset(self) -> None:
        """Occurrences of different markers are merged in source order."""
        result = find_all_markers("a { b: c; }", ["}", ";", "{"])
        assert result == [("{", 2), (";", 8), ("}", 10)]

    def test_keyword_markers_ignore_case(self) -> None:
        """url( matches in any case without shifting offsets."""
        result = find_all_markers("a{b:URL(x)}", ["{", "}", "url("])
        assert result == [("{", 1), ("url(", 4), ("}", 10)]

    def test_punctuation_is_case_sensitive_literal(self) -> None:
        """Punctuation markers are matched literally."""
        assert find_all_markers("a/*b*/", ["/*"]) == [("/*", 1)]

    def test_occurrences_do_not_overlap(self) -> None:
        """A marker is not found again inside its own previous match."""
        assert find_all_markers("///", ["//"]) == [("//", 0)]

    def test_single_character_markers_repeat(self) -> None:
        """Adjacent one-character markers are all found."""
        assert find_all_markers("\\\\", ["\\"]) == [("\\", 0), ("\\", 1)]

    def test_no_markers(self) -> None:
        """Plain text yields an empty list."""
        assert find_all_markers("color red", CSS_MARKERS) == []

    def test_empty_source(self) -> None:
        """Empty input yields an empty list."""
        assert find_all_markers("", CSS_MARKERS) == []

    def test_same_offset_prefers_longer_marker(self) -> None:
        """Ties are broken by length, longest first."""
        result = find_all_markers("/*", ["/", "/*"])
        assert result == [("/*", 0), ("/", 0)]

    def test_less_markers_are_optional(self) -> None:
        """LESS markers are only part of the set when enabled."""
        assert markers_for(False) == CSS_MARKERS
        assert markers_for(True) == CSS_MARKERS + LESS_MARKERS
        assert find_all_markers("a(b)", markers_for(False)) == []
        assert find_all_markers("a(b)", markers_for(True)) == [("(", 1), (")", 3)]


class TestFindEndOfQuotedString:
    """Quoted string end detection."""

    def test_simple_string(self) -> None:
        """Returns the offset after the closing quote."""
        assert find_end_of_quoted_string('"abc" x', '"', 0) == 5

    def test_other_quote_is_ignored(self) -> None:
        """A different quote character does not close the string."""
        assert find_end_of_quoted_string("'a\"b' x", "'", 0) == 5

    def test_escaped_quote(self) -> None:
        """A backslash-escaped quote does not close the string."""
        source = '"a\\"b"'
        assert find_end_of_quoted_string(source, '"', 0) == len(source)

    def test_escaped_backslash_before_quote(self) -> None:
        """An escaped backslash does not escape the quote after it."""
        source = '"a\\\\"b'
        assert find_end_of_quoted_string(source, '"', 0) == 5

    def test_start_offset(self) -> None:
        """Search starts after the opening quote at ``start``."""
        assert find_end_of_quoted_string('x = "y";', '"', 4) == 7

    def test_unterminated(self) -> None:
        """Missing closing quote returns None."""
        assert find_end_of_quoted_string('"abc', '"', 0) is None

    def test_only_escaped_quote(self) -> None:
        """A string closed only by an escaped quote is unterminated."""
        assert find_end_of_quoted_string('"a\\"', '"', 0) is None


class TestFindEndOfUrl:
    """url(...) end detection."""

    def test_unquoted(self) -> None:
        """Unquoted url ends after the first closing parenthesis."""
        assert find_end_of_url("url(foo.png) x", 0) == 12

    def test_unquoted_may_contain_markers(self) -> None:
        """Semicolons and braces are valid inside an unquoted url."""
        source = "url(data:image/png;base64,x/*}{&)"
        assert find_end_of_url(source, 0) == len(source)

    def test_quoted_with_whitespace(self) -> None:
        """Whitespace around a quoted url is allowed."""
        assert find_end_of_url('url( "a b" ) ', 0) == 12

    def test_quoted_may_contain_parentheses(self) -> None:
        """Parentheses inside quotes do not end the url."""
        source = 'url("a)b")'
        assert find_end_of_url(source, 0) == len(source)

    def test_start_offset(self) -> None:
        """The url can start anywhere in the source."""
        source = "b: url(x);"
        assert find_end_of_url(source, 3) == 9

    @pytest.mark.parametrize("source", ["url(a b)", "url(a\"b)", "url(a(b)", "url(a\x01b)"])
    def test_invalid_characters(self, source: str) -> None:
        """Whitespace, quotes, parentheses and control chars are invalid in bare urls."""
        with pytest.raises(ParseError) as exc_info:
            find_end_of_url(source, 0)
        assert exc_info.value.kind is ErrorKind.INVALID_URL
        assert exc_info.value.message == "Invalid URL"

    @pytest.mark.parametrize("source", ["url(abc", "url(   ", "url(", 'url("abc"'])
    def test_missing_parenthesis(self, source: str) -> None:
        """Reaching the end of input is reported as an unterminated url."""
        with pytest.raises(ParseError) as exc_info:
            find_end_of_url(source, 0)
        assert exc_info.value.kind is ErrorKind.UNTERMINATED_URL
        assert exc_info.value.message == "Cannot find end of URL"

    def test_unterminated_string(self) -> None:
        """An unclosed quote inside url() is reported at the quote."""
        with pytest.raises(ParseError) as exc_info:
            find_end_of_url('url(\n"abc', 0)
        assert exc_info.value.kind is ErrorKind.UNTERMINATED_URL
        assert exc_info.value.message == "Incomplete string"
        assert exc_info.value.offset == 5
        assert exc_info.value.lineno == 2

    def test_error_line_number(self) -> None:
        """Errors carry the line of the url."""
        with pytest.raises(ParseError) as exc_info:
            find_end_of_url("a {\n  b: url(x y);\n}", 9)
        assert str(exc_info.value) == "Invalid URL on line 2"
