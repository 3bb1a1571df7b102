"""
Stylescan: error-tolerant CSS and LESS tokenizer.

Splits stylesheets into block headers, declarations and raw statements
without evaluating them. Malformed input never raises: problems are repaired
and optionally collected as ParseError instances. Zero runtime dependencies.

Quick Start:
    >>> from stylescan import build, tokenize, tree
    >>> tokens = tokenize("a { color: red !important; }")
    >>> tokens[1]
    Rule(key='color', value='red', modifiers=frozenset({'important'}), offset=3, error=False)

    >>> build(tree(".a { b: c; }"), new_line_after_selector=False)
    '.a {\\n\\tb: c;\\n}'

Collecting errors:
    >>> from stylescan import Tokenizer
    >>> tokenizer = Tokenizer(ignore_errors=False)
    >>> _ = tokenizer.tokenize(".foo { color: red;")
    >>> [str(error) for error in tokenizer.errors]
    ['Missing } on line 1']
"""

from collections.abc import Iterable
from typing import Any

from stylescan.config import (
    BuildConfig,
    TokenizeConfig,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize_config_context,
)
from stylescan.errors import BuildError, ErrorKind, ParseError, StylescanError
from stylescan.lexer import Tokenizer
from stylescan.renderers.css import CssRenderer
from stylescan.renderers.protocol import TokenRenderer
from stylescan.tokens import AtRule, BlockEnd, BlockStart, Code, Rule, Token

__version__ = "0.1.0"


def tokenize(source: str, **options: Any) -> list[Token]:
    """Tokenize a stylesheet into a flat token list.

    Errors are not returned; use a Tokenizer instance to inspect them.

    Args:
        source: Stylesheet text
        **options: TokenizeConfig overrides (``less_syntax=True``, ...)

    Example:
        >>> tokenize("color: red", split_rules=False)
        [Code(text='color: red', offset=0, error=False)]
    """
    return Tokenizer(**options).tokenize(source)


def tree(source: str, **options: Any) -> list[Token]:
    """Tokenize a stylesheet into a tree of tokens.

    Args:
        source: Stylesheet text
        **options: TokenizeConfig overrides
    """
    return Tokenizer(**options).tree(source)


def build(tokens: Iterable[Token], config: BuildConfig | None = None, **options: Any) -> str:
    """Render tokens back to stylesheet text.

    Args:
        tokens: Flat or tree-form tokens
        config: Output layout (defaults to BuildConfig())
        **options: BuildConfig overrides (``minify=True``, ...)
    """
    from stylescan.renderers.css import build as render

    return render(tokens, config, **options)


__all__ = [
    "__version__",
    # High-level API
    "build",
    "tokenize",
    "tree",
    "Tokenizer",
    "CssRenderer",
    "TokenRenderer",
    # Configuration
    "BuildConfig",
    "TokenizeConfig",
    "get_tokenize_config",
    "reset_tokenize_config",
    "set_tokenize_config",
    "tokenize_config_context",
    # Tokens
    "AtRule",
    "BlockEnd",
    "BlockStart",
    "Code",
    "Rule",
    "Token",
    # Errors
    "BuildError",
    "ErrorKind",
    "ParseError",
    "StylescanError",
]
