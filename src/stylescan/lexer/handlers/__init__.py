"""Marker handlers for the stylescan tokenizer.

Each handler is a mixin with one method per marker. Handlers receive the
ScanState and the marker offset, update the state, and may emit tokens
through the classifier mixins.
"""

from __future__ import annotations

from stylescan.lexer.handlers.blocks import BlockHandlerMixin
from stylescan.lexer.handlers.comments import CommentHandlerMixin
from stylescan.lexer.handlers.less import LessHandlerMixin
from stylescan.lexer.handlers.literals import LiteralHandlerMixin

__all__ = [
    "BlockHandlerMixin",
    "CommentHandlerMixin",
    "LessHandlerMixin",
    "LiteralHandlerMixin",
]
