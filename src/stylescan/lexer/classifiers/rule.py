"""Declaration classifier mixin."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto

from stylescan.config import TokenizeConfig
from stylescan.errors import ErrorKind
from stylescan.lexer.state import ScanState
from stylescan.lexer.words import Word, WordKind, merge_words
from stylescan.tokens import Code, Rule

_EXTEND = "extend"


class RuleVerdict(Enum):
    """Why a statement is not a Rule."""

    BARE = auto()  # LESS mixin call or @variable statement, valid as code
    INVALID = auto()  # neither a declaration nor a recognized bare statement
    EMPTY = auto()  # declaration with an empty key or value


class RuleClassifierMixin:
    """Mixin for turning a statement into a Rule or Code token.

    Required Host Attributes:
        - _config: TokenizeConfig

    Required Host Methods:
        - _record(state, kind, message, offset, *, pending)

    """

    _config: TokenizeConfig

    def _record(
        self, state: ScanState, kind: ErrorKind, message: str, offset: int, *, pending: bool
    ) -> None:
        """Record an error. Implemented by Tokenizer."""
        raise NotImplementedError

    def _emit_statement(self, state: ScanState, extra: str = "") -> None:
        """Classify ``state.words`` and append the resulting token.

        A valid declaration becomes a Rule. Anything else is kept as Code
        with ``extra`` (the terminating ``;``) appended. Blank statements
        produce nothing.
        """
        words = state.words
        if not words:
            return

        word_error = any(word.error for word in words)
        result = RuleVerdict.INVALID if word_error else self._find_rule_pairs(words)

        if isinstance(result, Rule):
            state.tokens.append(replace(result, error=state.error))
            return

        text = merge_words(words)
        if not text:
            return
        text += extra

        offset = words[0].offset
        if result is RuleVerdict.INVALID and not word_error and not state.error:
            self._record(state, ErrorKind.INVALID_RULE, "Invalid css rule", offset, pending=False)
        state.tokens.append(Code(text=text, offset=offset, error=state.error or word_error))

    def _find_rule_pairs(self, words: list[Word]) -> Rule | RuleVerdict:
        """Split words into a key and a value around the first ``:``.

        Only TEXT words are searched for the separator. In LESS mode a
        FUNCTION word may appear in the key (mixin calls) and ``:extend``
        does not count as a separator.
        """
        less = self._config.less_syntax
        key_parts: list[str] = []
        value_parts: list[str] = []
        in_key = True
        has_function = False

        for word in words:
            if not word.is_text:
                if not in_key:
                    value_parts.append(word.text)
                    continue
                if not less:
                    return RuleVerdict.INVALID
                if word.kind is WordKind.FUNCTION:
                    has_function = True
                key_parts.append(word.text)
                continue

            segments = word.text.split(":")
            if less and len(segments) > 1:
                segments = _rejoin_extend(segments)

            if len(segments) > 2:
                return RuleVerdict.INVALID
            if len(segments) == 2:
                if not in_key:
                    return RuleVerdict.INVALID
                key_parts.append(segments[0])
                value_parts.append(segments[1])
                in_key = False
                continue

            (key_parts if in_key else value_parts).append(word.text)

        if in_key:
            key = "".join(key_parts).strip()
            if less and (has_function or key.startswith("@")):
                return RuleVerdict.BARE
            return RuleVerdict.INVALID

        key = "".join(key_parts).strip()
        value = "".join(value_parts).strip()
        if not key or not value:
            return RuleVerdict.EMPTY

        value, modifiers = _strip_modifiers(value, self._config.rule_modifiers)
        if not value:
            return RuleVerdict.EMPTY

        return Rule(key=key, value=value, modifiers=modifiers, offset=words[0].offset)


def _strip_modifiers(value: str, names: tuple[str, ...]) -> tuple[str, frozenset[str]]:
    """Remove trailing ``!name`` flags in any order, case-insensitively.

    >>> value, found = _strip_modifiers("1px !default !IMPORTANT", ("default", "important"))
    >>> value, sorted(found)
    ('1px', ['default', 'important'])
    """
    found: set[str] = set()
    lowered = value.lower()
    while value:
        for name in names:
            suffix = "!" + name.lower()
            if name not in found and lowered.endswith(suffix):
                value = value[: -len(suffix)].strip()
                lowered = value.lower()
                found.add(name)
                break
        else:
            break
    return value, frozenset(found)


def _rejoin_extend(segments: list[str]) -> list[str]:
    """Glue ``:extend`` segments back onto the segment before them.

    >>> _rejoin_extend(["&", "extend(.a)"])
    ['&:extend(.a)']
    """
    result = [segments[0]]
    for segment in segments[1:]:
        if segment == _EXTEND or segment.startswith(_EXTEND + "("):
            result[-1] += ":" + segment
        else:
            result.append(segment)
    return result
