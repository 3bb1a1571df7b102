"""Folding of flat token sequences into trees.

Flat form:  BlockStart, Rule, BlockStart, Rule, BlockEnd, BlockEnd
Tree form:  BlockStart(children=(Rule, BlockStart(children=(Rule,))))

Each BlockEnd closes exactly one open block. A BlockEnd with nothing open
ends the current top-level run; tokens after it are still folded and
appended to the root, and an "Unmatched }" error is reported for them.

Thread Safety:
All functions are pure. Tokens are immutable and shared, not copied.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import replace

from stylescan.errors import ErrorKind, ParseError
from stylescan.tokens import BlockEnd, BlockStart, Token
from stylescan.utils.logger import get_logger

logger = get_logger(__name__)


def fold_level(tokens: Sequence[Token], start: int = 0) -> tuple[list[Token], int]:
    """Fold tokens starting at ``start`` until an unmatched BlockEnd.

    Blocks still open at the end of input are closed with the children
    collected so far.

    Returns:
        Folded tokens and the index just past the consumed tokens. When an
        unmatched BlockEnd stopped the fold the index points after it.
    """
    results: list[Token] = []
    # (header, children) for every open block, innermost last
    stack: list[tuple[BlockStart, list[Token]]] = []

    index = start
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if isinstance(token, BlockEnd):
            if not stack:
                return results, index
            header, children = stack.pop()
            target = stack[-1][1] if stack else results
            target.append(replace(header, children=tuple(children)))
        elif isinstance(token, BlockStart) and token.children is None:
            stack.append((token, []))
        else:
            (stack[-1][1] if stack else results).append(token)

    while stack:
        header, children = stack.pop()
        target = stack[-1][1] if stack else results
        target.append(replace(header, children=tuple(children)))

    return results, index


def build_tree(
    tokens: Sequence[Token], source: str = "", *, ignore_errors: bool = True
) -> tuple[list[Token], list[ParseError]]:
    """Fold a flat token sequence into a tree.

    Args:
        tokens: Flat tokens from :meth:`Tokenizer.tokenize`
        source: Source the tokens came from, used for error line numbers
        ignore_errors: Do not report unmatched ``}``

    Returns:
        Root tokens and the "Unmatched }" errors found while folding.

    Example:
        >>> from stylescan import tokenize
        >>> root, errors = build_tree(tokenize("a { b: c; }"))
        >>> root[0].children
        (Rule(key='b', value='c', modifiers=frozenset(), offset=3, error=False),)
    """
    errors: list[ParseError] = []
    results, index = fold_level(tokens)

    while index < len(tokens):
        offset = _offset_of(tokens[index])
        if not ignore_errors:
            errors.append(
                ParseError.at(ErrorKind.UNMATCHED_BLOCK_END, "Unmatched }", source, offset)
            )
        logger.debug("Unmatched } before offset %d", offset)
        level, index = fold_level(tokens, index)
        results.extend(level)

    return results, errors


def walk(tokens: Sequence[Token], depth: int = 0) -> Iterator[tuple[int, Token]]:
    """Yield ``(depth, token)`` for every token of a tree, parents first.

    Example:
        >>> from stylescan import tree
        >>> [(d, type(t).__name__) for d, t in walk(tree("a { b { c: d; } }"))]
        [(0, 'BlockStart'), (1, 'BlockStart'), (2, 'Rule')]
    """
    for token in tokens:
        yield depth, token
        if isinstance(token, BlockStart) and token.children:
            yield from walk(token.children, depth + 1)


def _offset_of(token: Token) -> int:
    return getattr(token, "offset", 0)


__all__ = ["build_tree", "fold_level", "walk"]
