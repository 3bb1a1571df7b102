"""Token definitions for the stylescan tokenizer.

The tokenizer produces a closed set of token types:

Token (base)
├── Code        unparsed or error-recovered statement
├── BlockStart  selector or at-rule header followed by ``{``
├── BlockEnd    closing ``}`` (flat form only)
└── Rule        ``key: value`` declaration

In flat form every BlockStart is followed, eventually, by its BlockEnd. In
tree form BlockStart.children holds the block body and there are no BlockEnd
tokens.

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    Every token type carries an ``offset`` field: the absolute position in
    the source where the statement starts (0 for synthesized tokens).

    """


@dataclass(frozen=True, slots=True)
class AtRule:
    """Name and values of an at-rule header.

    ``@media screen, print`` has name ``media`` and values
    ``("screen", "print")``.

    """

    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Code(Token):
    """Statement kept as raw text.

    Produced for block bodies when rules are not split, for statements the
    classifier could not turn into a rule (mixin calls, ``@import``), and
    for error recovery. ``error`` is set when the statement was emitted
    while a recorded error was pending.

    """

    text: str
    offset: int = 0
    error: bool = False


@dataclass(frozen=True, slots=True)
class BlockStart(Token):
    """Header of a ``{ ... }`` block.

    At most one of ``selectors`` and ``at_rule`` is set. When neither is set
    the header could not be classified and ``header`` is the only usable
    data. ``children`` is only populated in tree form.

    """

    header: str = ""
    selectors: tuple[str, ...] | None = None
    at_rule: AtRule | None = None
    children: tuple[Token, ...] | None = None
    offset: int = 0

    @property
    def is_at_rule(self) -> bool:
        return self.at_rule is not None


@dataclass(frozen=True, slots=True)
class BlockEnd(Token):
    """Closing ``}`` of a block (flat form only)."""

    offset: int = 0


@dataclass(frozen=True, slots=True)
class Rule(Token):
    """A ``key: value`` declaration.

    Trailing ``!important``/``!default`` (or other configured) flags are
    removed from ``value`` and stored in ``modifiers``.

    """

    key: str
    value: str
    modifiers: frozenset[str] = frozenset()
    offset: int = 0
    error: bool = False

    @property
    def important(self) -> bool:
        return "important" in self.modifiers


__all__ = ["AtRule", "BlockEnd", "BlockStart", "Code", "Rule", "Token"]
