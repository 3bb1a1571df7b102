"""Stylesheet renderer using StringBuilder pattern.

Renders tokens back to text. Flat and tree forms can be mixed: a BlockStart
with children is closed immediately, one without children raises the
indentation until the next BlockEnd.

Layout is controlled by BuildConfig. Offsets and error flags are ignored.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from stylescan.config import BuildConfig
from stylescan.errors import BuildError
from stylescan.stringbuilder import StringBuilder
from stylescan.tokens import BlockEnd, BlockStart, Code, Rule, Token
from stylescan.utils.logger import get_logger

logger = get_logger(__name__)


class CssRenderer:
    """Render tokens as stylesheet text.

    Usage:
        >>> from stylescan.tokens import BlockEnd, BlockStart, Rule
        >>> CssRenderer().render([
        ...     BlockStart(selectors=("a",)),
        ...     Rule("color", "red", frozenset({"important"})),
        ...     BlockEnd(),
        ... ])
        'a\\n{\\n\\tcolor: red !important;\\n}'

    Thread Safety:
        Each render() call uses its own StringBuilder.

    """

    __slots__ = ("_config",)

    def __init__(self, config: BuildConfig | None = None) -> None:
        self._config = config or BuildConfig()

    @property
    def config(self) -> BuildConfig:
        return self._config

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens, stripping surrounding whitespace from the result."""
        sb = StringBuilder()
        self._render_tokens(tokens, sb, "")
        return sb.build().strip()

    def _render_tokens(self, tokens: Iterable[Token], sb: StringBuilder, space: str) -> None:
        config = self._config
        indent = config.indent
        nl = config.line_break
        previous: Token | None = None

        for token in tokens:
            match token:
                case Code():
                    sb.append(space).append(token.text).append(nl)
                case Rule():
                    self._render_rule(token, sb, space)
                case BlockEnd():
                    space = space[len(indent) :]
                    sb.append(space).append("}").append(nl)
                case BlockStart():
                    if isinstance(previous, BlockEnd):
                        sb.append(nl)
                    self._render_header(token, sb, space)
                    if token.children is not None:
                        self._render_tokens(token.children, sb, space + indent)
                        sb.append(space).append("}").append(nl)
                    else:
                        space += indent
                case _:
                    logger.debug("Cannot render %r", token)
                    raise BuildError(f"Cannot render {type(token).__name__} as a token")
            previous = token

    def _render_header(self, token: BlockStart, sb: StringBuilder, space: str) -> None:
        config = self._config
        separator = config.selector_separator
        sb.append(space)

        if token.selectors is not None:
            sb.append(separator.join(token.selectors))
        elif token.is_at_rule:
            sb.append("@").append(token.at_rule.name)
            values = separator.join(token.at_rule.values)
            if values:
                sb.append(" ").append(values)
        else:
            # Unclassified header
            sb.append(token.header)

        if config.new_line_after_selector:
            sb.append(config.line_break).append(space)
        elif not config.minify:
            sb.append(" ")
        sb.append("{").append(config.line_break)

    def _render_rule(self, token: Rule, sb: StringBuilder, space: str) -> None:
        config = self._config
        sb.append(space).append(token.key).append(config.rule_separator).append(token.value)
        for modifier in config.rule_modifiers:
            if modifier in token.modifiers:
                sb.append(" !").append(modifier)
        sb.append(";").append(config.line_break)


def build(tokens: Iterable[Token], config: BuildConfig | None = None, **options: Any) -> str:
    """Render tokens with ``config``, overridden by keyword options.

    Keyword options may use field names or camelCase aliases
    (``newLineAfterSelector``).

    Example:
        >>> from stylescan import tokenize
        >>> build(tokenize("a{color:red}"), minify=True)
        'a{color:red;}'
    """
    config = config or BuildConfig()
    if options:
        config = config.with_options(options)
    return CssRenderer(config).render(tokens)
