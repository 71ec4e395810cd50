"""Tests for the selector parser, AST and class-name escaping."""

import pytest

from tailweave.errors import SelectorParseError
from tailweave.selector import (
    escape_class_name,
    escape_commas,
    parse_selector,
    unescape,
)
from tailweave.selector.model import CLASS, PSEUDO, TAG, SimpleSelector


# ---------------------------------------------------------------------------
# Round-tripping
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            ".a",
            ".a .b",
            ".a > .b",
            ".a+.b",
            ".a ~ .b",
            ".a, .b",
            ".a,.b",
            "*",
            "div.a#main[data-x='1']:hover::before",
            ".hover\\:bg-red-500:hover",
            ".w-1\\.5",
            ".\\32 xl\\:block",
            ":not(.a)",
            ".group:hover .group-hover\\:text-red-500",
            "& > :not([hidden]) ~ :not([hidden])",
            ".a:nth-child(2n+1)",
        ],
    )
    def test_serialize_reproduces_input(self, text: str) -> None:
        assert parse_selector(text).serialize() == text

    def test_surrounding_whitespace_kept(self) -> None:
        ast = parse_selector("  .a .b ")
        assert ast.leading == "  "
        assert ast.trailing == " "
        assert str(ast) == "  .a .b "

    def test_empty_selector_rejected(self) -> None:
        with pytest.raises(SelectorParseError):
            parse_selector("   ")

    def test_malformed_selector_rejected(self) -> None:
        with pytest.raises(SelectorParseError):
            parse_selector(".a >> {")


# ---------------------------------------------------------------------------
# AST shape
# ---------------------------------------------------------------------------


class TestStructure:
    def test_selector_list_split(self) -> None:
        ast = parse_selector(".a .b, .c")
        assert len(ast.selectors) == 2
        assert ast.separators == [", "]

    def test_compounds_and_combinators(self) -> None:
        ast = parse_selector(".a > .b .c")
        selector = ast.selectors[0]
        assert len(selector.compounds) == 3
        assert [p for p in selector.parts if isinstance(p, str)] == [" > ", " "]

    def test_class_values_are_unescaped(self) -> None:
        ast = parse_selector(".hover\\:bg-red-500")
        node = ast.selectors[0].compounds[0].nodes[0]
        assert node.kind == CLASS
        assert node.value == "hover:bg-red-500"
        assert node.raw == "hover\\:bg-red-500"

    def test_node_kinds(self) -> None:
        nodes = parse_selector("div.a:hover").selectors[0].compounds[0].nodes
        assert [n.kind for n in nodes] == [TAG, CLASS, PSEUDO]

    def test_pseudo_arguments_are_opaque(self) -> None:
        ast = parse_selector(".a:not(.b)")
        assert ast.class_count() == 1
        pseudo = ast.selectors[0].compounds[0].nodes[1]
        assert pseudo.value == ":not"
        assert pseudo.arguments == "(.b)"

    def test_walk_classes_in_document_order(self) -> None:
        seen: list[str] = []
        parse_selector(".a .b, .c.d").walk_classes(lambda node, compound: seen.append(node.value))
        assert seen == ["a", "b", "c", "d"]


class TestInsertAfter:
    def test_pseudo_class_goes_after_its_class(self) -> None:
        ast = parse_selector(".a.b")
        compound = ast.selectors[0].compounds[0]
        compound.insert_after(compound.nodes[0], SimpleSelector.pseudo(":hover"))
        assert ast.serialize() == ".a:hover.b"

    def test_pseudo_class_stays_ahead_of_pseudo_element(self) -> None:
        ast = parse_selector(".a::placeholder")
        compound = ast.selectors[0].compounds[0]
        compound.insert_after(compound.nodes[0], SimpleSelector.pseudo(":focus"))
        assert ast.serialize() == ".a:focus::placeholder"

    def test_pseudo_element_goes_last(self) -> None:
        ast = parse_selector(".a:hover")
        compound = ast.selectors[0].compounds[0]
        compound.insert_after(compound.nodes[0], SimpleSelector.pseudo("::before"))
        assert ast.serialize() == ".a:hover::before"

    def test_functional_pseudo_builder(self) -> None:
        node = SimpleSelector.pseudo(":nth-child(odd)")
        assert node.value == ":nth-child"
        assert node.serialize() == ":nth-child(odd)"


class TestRename:
    def test_rename_reescapes(self) -> None:
        ast = parse_selector(".a")
        node = ast.selectors[0].compounds[0].nodes[0]
        node.rename("md:a")
        assert ast.serialize() == ".md\\:a"

    def test_rename_to_same_value_keeps_raw(self) -> None:
        ast = parse_selector(".\\61")
        node = ast.selectors[0].compounds[0].nodes[0]
        node.rename("a")
        assert ast.serialize() == ".\\61"


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


class TestEscape:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("block", "block"),
            ("hover:bg-red-500", "hover\\:bg-red-500"),
            ("w-1.5", "w-1\\.5"),
            ("bg-red-500/50", "bg-red-500\\/50"),
            ("bg-[#1da1f2]", "bg-\\[\\#1da1f2\\]"),
            ("2xl:block", "\\32 xl\\:block"),
            ("-2", "-\\32 "),
            ("-", "\\-"),
            ("a,b", "a\\,b"),
            ("café", "café"),
        ],
    )
    def test_escape_class_name(self, value: str, expected: str) -> None:
        assert escape_class_name(value) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("hover\\:bg", "hover:bg"),
            ("\\32 xl", "2xl"),
            ("a\\2c b", "a,b"),
            ("plain", "plain"),
        ],
    )
    def test_unescape(self, raw: str, expected: str) -> None:
        assert unescape(raw) == expected

    def test_escape_commas(self) -> None:
        assert escape_commas("a\\,b\\,c") == "a\\2c b\\2c c"

    def test_escaped_class_parses_back_to_value(self) -> None:
        for value in ("md:hover:bg-red-500", "w-1/2", "top-[calc(100%-1rem)]", "2xl:p-4"):
            ast = parse_selector("." + escape_class_name(value))
            assert ast.selectors[0].compounds[0].nodes[0].value == value
