"""TokenRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this
protocol. The built-in ``CssRenderer`` is the reference implementation.

Example:
    from stylescan.renderers.protocol import TokenRenderer

    def save(renderer: TokenRenderer, tokens: list[Token]) -> str:
        return renderer.render(tokens)

"""

from collections.abc import Iterable
from typing import Protocol

from stylescan.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers."""

    def render(self, tokens: Iterable[Token]) -> str:
        """Render flat or tree-form tokens to a string."""
        ...
