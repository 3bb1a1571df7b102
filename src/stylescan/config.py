"""Tokenizer and builder configuration for stylescan.

Both configs are frozen dataclasses. The default TokenizeConfig lives in a
ContextVar so a host application can change the defaults for a block of code
without threading a config through every call.

Usage:
    # Explicit config
    from stylescan import Tokenizer
    from stylescan.config import TokenizeConfig

    tokenizer = Tokenizer(TokenizeConfig(less_syntax=True))

    # Or change the defaults for a block of code
    from stylescan.config import tokenize_config_context

    with tokenize_config_context(TokenizeConfig(ignore_errors=False)):
        tokens = Tokenizer().tokenize("a { color: red }")

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Iterator

DEFAULT_RULE_MODIFIERS: tuple[str, ...] = ("default", "important")

# camelCase option names accepted by from_dict()
_TOKENIZE_ALIASES = {
    "splitRules": "split_rules",
    "ignoreErrors": "ignore_errors",
    "lessSyntax": "less_syntax",
    "ruleModifiers": "rule_modifiers",
}
_BUILD_ALIASES = {
    "newLineAfterSelector": "new_line_after_selector",
    "ruleModifiers": "rule_modifiers",
}


def _normalize_keys(config_dict: dict[str, Any], aliases: dict[str, str]) -> dict[str, Any]:
    """Map camelCase option names to field names."""
    normalized = {aliases.get(key, key): value for key, value in config_dict.items()}
    if "rule_modifiers" in normalized:
        normalized["rule_modifiers"] = tuple(normalized["rule_modifiers"])
    return normalized


@dataclass(frozen=True, slots=True)
class TokenizeConfig:
    """Immutable tokenizer configuration.

    Attributes:
        split_rules: Split block bodies into Rule tokens. When False each
            block body is kept as a single Code token.
        ignore_errors: Repair problems silently instead of recording
            ParseError instances.
        less_syntax: Enable LESS/SCSS syntax: ``(`` ``)`` nesting, ``//``
            comments, ``@{``/``#{`` interpolation and ``&:extend``.
        rule_modifiers: ``!flag`` suffixes recognized at the end of values.

    """

    split_rules: bool = True
    ignore_errors: bool = True
    less_syntax: bool = False
    rule_modifiers: tuple[str, ...] = DEFAULT_RULE_MODIFIERS

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> TokenizeConfig:
        """Create TokenizeConfig from dictionary.

        Accepts both snake_case field names and the camelCase option names
        used by other tokenizers (``splitRules``, ``lessSyntax``, ...).
        Unknown keys are silently ignored.

        Example:
            >>> config = TokenizeConfig.from_dict({"lessSyntax": True, "x": 1})
            >>> config.less_syntax
            True

        """
        valid_fields = set(cls.__dataclass_fields__)
        normalized = _normalize_keys(config_dict, _TOKENIZE_ALIASES)
        filtered = {k: v for k, v in normalized.items() if k in valid_fields}
        return cls(**filtered)

    def with_options(self, options: dict[str, Any]) -> TokenizeConfig:
        """Return a copy with ``options`` applied.

        Accepts the same names as from_dict(), but unknown names raise
        TypeError.
        """
        return replace(self, **_normalize_keys(options, _TOKENIZE_ALIASES))


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable serializer configuration.

    Attributes:
        minify: Compact output. Forces empty indent and newline strings.
        tab: Indentation unit.
        newline: Line separator.
        new_line_after_selector: Put ``{`` on its own line after a header.
        rule_modifiers: Order in which ``!flag`` suffixes are written.

    """

    minify: bool = False
    tab: str = "\t"
    newline: str = "\n"
    new_line_after_selector: bool = True
    rule_modifiers: tuple[str, ...] = DEFAULT_RULE_MODIFIERS

    @property
    def indent(self) -> str:
        return "" if self.minify else self.tab

    @property
    def line_break(self) -> str:
        return "" if self.minify else self.newline

    @property
    def rule_separator(self) -> str:
        return ":" if self.minify else ": "

    @property
    def selector_separator(self) -> str:
        return "," if self.minify else ", "

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> BuildConfig:
        """Create BuildConfig from dictionary, ignoring unknown keys."""
        valid_fields = set(cls.__dataclass_fields__)
        normalized = _normalize_keys(config_dict, _BUILD_ALIASES)
        filtered = {k: v for k, v in normalized.items() if k in valid_fields}
        return cls(**filtered)

    def with_options(self, options: dict[str, Any]) -> BuildConfig:
        """Return a copy with ``options`` applied; unknown names raise TypeError."""
        return replace(self, **_normalize_keys(options, _BUILD_ALIASES))


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizeConfig = TokenizeConfig()

_tokenize_config: ContextVar[TokenizeConfig] = ContextVar(
    "tokenize_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenize_config() -> TokenizeConfig:
    """Get the default tokenizer configuration for this context."""
    return _tokenize_config.get()


def set_tokenize_config(config: TokenizeConfig) -> None:
    """Set the default tokenizer configuration for this context.

    Only affects Tokenizer instances created afterwards; existing instances
    keep the config they were built with.
    """
    _tokenize_config.set(config)


def reset_tokenize_config() -> None:
    """Reset to the module-level default configuration."""
    _tokenize_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenize_config_context(config: TokenizeConfig) -> Iterator[None]:
    """Context manager for temporary default config changes.

    Example:
        >>> with tokenize_config_context(TokenizeConfig(less_syntax=True)):
        ...     get_tokenize_config().less_syntax
        True

    Properly restores the previous config even if an exception is raised.
    """
    previous = _tokenize_config.get()
    _tokenize_config.set(config)
    try:
        yield
    finally:
        _tokenize_config.set(previous)


__all__ = [
    "DEFAULT_RULE_MODIFIERS",
    "BuildConfig",
    "TokenizeConfig",
    "get_tokenize_config",
    "reset_tokenize_config",
    "set_tokenize_config",
    "tokenize_config_context",
]
