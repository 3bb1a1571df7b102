"""Tests for the public package API."""

import logging

import stylescan
from stylescan import Tokenizer, build, tokenize, tree
from stylescan.tokens import BlockEnd, BlockStart, Code, Rule
from stylescan.utils.logger import get_logger


class TestExports:
    def test_version(self) -> None:
        assert stylescan.__version__ == "0.1.0"

    def test_all_names_exist(self) -> None:
        for name in stylescan.__all__:
            assert hasattr(stylescan, name), name


class TestConvenienceFunctions:
    """Module-level tokenize(), tree() and build()."""

    def test_tokenize(self) -> None:
        assert tokenize("a { b: c }") == [
            BlockStart(header="a", selectors=("a",), offset=0),
            Rule("b", "c", offset=3),
            BlockEnd(offset=9),
        ]

    def test_tokenize_options(self) -> None:
        assert tokenize("a { b: c }", split_rules=False)[1] == Code("b: c", offset=3)

    def test_tokenize_camel_case_options(self) -> None:
        assert tokenize("a { b: c }", splitRules=False)[1] == Code("b: c", offset=3)

    def test_tree(self) -> None:
        assert tree("a { b: c }") == [
            BlockStart(
                header="a", selectors=("a",), offset=0, children=(Rule("b", "c", offset=3),)
            )
        ]

    def test_build(self) -> None:
        assert build(tree("a { b: c }"), minify=True) == "a{b:c;}"

    def test_matches_tokenizer(self) -> None:
        source = ".a { .b { c: d; } } e { f }"
        assert tokenize(source) == Tokenizer().tokenize(source)
        assert tree(source) == Tokenizer().tree(source)

    def test_never_raises(self) -> None:
        tokens = tokenize('}}} a { "b /* url( \\')
        assert isinstance(tokens, list)


class TestLogging:
    def test_logger_prefix(self) -> None:
        assert get_logger("mymodule").name == "stylescan.mymodule"
        assert get_logger("stylescan.tree").name == "stylescan.tree"

    def test_errors_are_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="stylescan"):
            Tokenizer(ignore_errors=False).tokenize("}")
        assert "Unexpected } on line 1" in caplog.text

    def test_summary_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="stylescan"):
            tokenize("a: b;")
        assert "Tokenized 5 chars into 1 tokens" in caplog.text
