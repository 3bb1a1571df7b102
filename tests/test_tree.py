"""Tests for folding flat tokens into trees."""

from stylescan import Tokenizer, tokenize, tree
from stylescan.tokens import AtRule, BlockEnd, BlockStart, Code, Rule
from stylescan.tree import build_tree, fold_level, walk

EXTRA_END = """.foo
                {
                    color: red;
                    border: 1px solid red;
                    &:hover {
                        color: blue;
                    }
                }
            }"""

EXTRA_MIDDLE = """.foo {
                color: red;
                border: 1px solid red;
                }
            }
            .bar {
                .baz {
                    color: blue;
            }"""


def block(header: str, offset: int, *children) -> BlockStart:
    return BlockStart(header=header, selectors=(header,), offset=offset, children=children)


class TestFlat:
    """Sources without blocks fold to themselves."""

    def test_code(self) -> None:
        tokenizer = Tokenizer(split_rules=False)
        assert tokenizer.tree("color: red") == [Code("color: red", offset=0)]

    def test_rules(self) -> None:
        assert tree("color: red; opacity: 1; padding: 0 !important") == [
            Rule("color", "red", offset=0),
            Rule("opacity", "1", offset=11),
            Rule("padding", "0", frozenset({"important"}), offset=23),
        ]


class TestBlocks:
    """Blocks collect the tokens between their braces as children."""

    def test_unsplit_body(self) -> None:
        tokenizer = Tokenizer(split_rules=False)
        assert tokenizer.tree("a { color: red; text-decoration: none }") == [
            block("a", 0, Code("color: red; text-decoration: none", offset=3)),
        ]

    def test_split_body(self) -> None:
        assert tree("a { color: red; text-decoration: none }") == [
            block(
                "a",
                0,
                Rule("color", "red", offset=3),
                Rule("text-decoration", "none", offset=15),
            ),
        ]

    def test_sibling_blocks(self) -> None:
        tokenizer = Tokenizer(split_rules=False)
        result = tokenizer.tree("a { color: red; text-decoration: none }\nb { font-weight: 500; }")
        assert result == [
            block("a", 0, Code("color: red; text-decoration: none", offset=3)),
            block("b", 39, Code("font-weight: 500;", offset=43)),
        ]

    def test_sibling_blocks_without_whitespace(self) -> None:
        result = tree("a { color: red; text-decoration: none }b{ font-weight: 500; }")
        assert result[1] == block("b", 39, Rule("font-weight", "500", offset=41))

    def test_nested_at_rule(self) -> None:
        source = (
            "a { color: red; text-decoration: none } "
            "@media (min-width: 700px) and (orientation: landscape), not all and (monochrome) "
            "{ a { text-decoration: underline; } }"
        )
        result = tree(source)
        assert len(result) == 2
        media = result[1]
        assert media.header == (
            "@media (min-width: 700px) and (orientation: landscape), not all and (monochrome)"
        )
        assert media.at_rule == AtRule(
            "media",
            ("(min-width: 700px) and (orientation: landscape)", "not all and (monochrome)"),
        )
        assert media.selectors is None
        assert media.offset == 39
        assert media.children == (
            block("a", 122, Rule("text-decoration", "underline", offset=126)),
        )

    def test_rules_around_nested_block(self) -> None:
        """Rules after a nested block stay in the parent."""
        assert tree(".foo { color: blue; & > .bar { color: red; } opacity: 1;}") == [
            block(
                ".foo",
                0,
                Rule("color", "blue", offset=6),
                block("& > .bar", 19, Rule("color", "red", offset=30)),
                Rule("opacity", "1", offset=44),
            ),
        ]

    def test_empty_block(self) -> None:
        assert tree("a {}") == [block("a", 0)]

    def test_no_block_ends_in_tree(self) -> None:
        result = tree("a { b { c { d: e; } } } f { }")
        assert not any(isinstance(token, BlockEnd) for _, token in walk(result))


class TestInvalidNesting:
    """Unbalanced braces still produce a tree."""

    def test_missing_block_end(self) -> None:
        tokenizer = Tokenizer(ignore_errors=False)
        source = ".foo { color: red; border: 1px solid red; &:hover { color: blue; }"
        result = tokenizer.tree(source)
        assert [str(e) for e in tokenizer.errors] == ["Missing } on line 1"]
        assert len(result) == 1
        assert [type(child) for child in result[0].children] == [Rule, Rule, BlockStart]

    def test_extra_block_end_at_end(self) -> None:
        """A trailing stray ``}`` has nothing after it to be unmatched."""
        tokenizer = Tokenizer(ignore_errors=False)
        result = tokenizer.tree(EXTRA_END)
        assert [str(e) for e in tokenizer.errors] == ["Unexpected } on line 9"]
        assert len(result) == 1

    def test_extra_block_end_in_middle(self) -> None:
        tokenizer = Tokenizer(ignore_errors=False)
        result = tokenizer.tree(EXTRA_MIDDLE)
        assert [str(e) for e in tokenizer.errors] == [
            "Unexpected } on line 5",
            "Unmatched } on line 6",
        ]
        assert [token.selectors for token in result] == [(".foo",), (".bar",)]
        assert result[1].children[0].selectors == (".baz",)
        assert result[1].children[0].children == (Rule("color", "blue", offset=147),)

    def test_errors_ignored(self) -> None:
        tokenizer = Tokenizer()
        result = tokenizer.tree(EXTRA_MIDDLE)
        assert tokenizer.errors == []
        assert len(result) == 2


class TestBuildTree:
    """Folding helpers work on any token sequence."""

    def test_fold_level_stops_at_unmatched_end(self) -> None:
        tokens = [Rule("a", "b"), BlockEnd(offset=5), Rule("c", "d", offset=6)]
        assert fold_level(tokens) == ([Rule("a", "b")], 2)
        assert fold_level(tokens, 2) == ([Rule("c", "d", offset=6)], 3)

    def test_build_tree_reports_unmatched_end(self) -> None:
        tokens = tokenize("a: b; } c: d;")
        root, errors = build_tree(tokens, "a: b; } c: d;", ignore_errors=False)
        assert root == [Rule("a", "b"), Rule("c", "d", offset=7)]
        assert [str(e) for e in errors] == ["Unmatched } on line 1"]
        assert errors[0].offset == 7

    def test_build_tree_ignores_errors_by_default(self) -> None:
        root, errors = build_tree([BlockEnd(), Rule("a", "b")])
        assert root == [Rule("a", "b")]
        assert errors == []

    def test_folded_blocks_are_leaves(self) -> None:
        """A BlockStart that already has children is not reopened."""
        folded = block("a", 0, Rule("b", "c"))
        root, _ = build_tree([folded, Rule("d", "e")])
        assert root == [folded, Rule("d", "e")]

    def test_unclosed_blocks_are_closed(self) -> None:
        tokens = [BlockStart(header="a", selectors=("a",)), BlockStart(header="b")]
        root, _ = build_tree(tokens)
        assert root == [
            BlockStart(
                header="a",
                selectors=("a",),
                children=(BlockStart(header="b", children=()),),
            )
        ]


class TestWalk:
    """walk() visits every token of a tree."""

    def test_depths(self) -> None:
        result = tree(".foo { color: blue; & > .bar { color: red; } opacity: 1;}")
        assert [(depth, type(token).__name__) for depth, token in walk(result)] == [
            (0, "BlockStart"),
            (1, "Rule"),
            (1, "BlockStart"),
            (2, "Rule"),
            (1, "Rule"),
        ]

    def test_flat_input(self) -> None:
        tokens = tokenize("a: b; c: d;")
        assert [depth for depth, _ in walk(tokens)] == [0, 0]
