"""Statement classifiers for the stylescan tokenizer.

Classifiers are pure logic over a list of words: they decide what kind of
token a statement becomes. They never move the scan cursor.
"""

from __future__ import annotations

from stylescan.lexer.classifiers.header import HeaderClassifierMixin
from stylescan.lexer.classifiers.rule import RuleClassifierMixin, RuleVerdict

__all__ = [
    "HeaderClassifierMixin",
    "RuleClassifierMixin",
    "RuleVerdict",
]
