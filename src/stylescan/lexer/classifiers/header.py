"""Block header classifier mixin."""

from __future__ import annotations

from stylescan.lexer.words import Word, merge_words
from stylescan.tokens import AtRule, BlockStart


class HeaderClassifierMixin:
    """Mixin for turning the words before ``{`` into a BlockStart.

    Headers are split on ``,`` to get selectors. A header whose first
    selector starts with ``@`` is an at-rule instead.

    """

    def _classify_header(self, words: list[Word]) -> BlockStart:
        header = merge_words(words)
        offset = words[0].offset if words else 0
        selectors = self._get_selectors(words)

        if not selectors:
            return BlockStart(header=header, offset=offset)

        first = selectors[0]
        if first.startswith("@"):
            name = first.split()[0][1:]
            values = (first[1 + len(name) :].strip(), *selectors[1:])
            return BlockStart(header=header, at_rule=AtRule(name, values), offset=offset)

        return BlockStart(header=header, selectors=tuple(selectors), offset=offset)

    def _get_selectors(self, words: list[Word]) -> list[str]:
        """Split a header on commas found in TEXT words.

        Strings, urls, functions and expressions are never split, so
        ``.a:not(.b, .c)`` stays one selector in LESS mode.
        """
        pieces: list[str] = []
        current = ""
        for word in words:
            if not word.is_text:
                current += word.text
                continue
            head, *rest = word.text.split(",")
            current += head
            for piece in rest:
                pieces.append(current)
                current = piece
        pieces.append(current)

        return [piece.strip() for piece in pieces if piece.strip()]
