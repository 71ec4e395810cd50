"""Tests for the CSS rule tree and the tinycss2-backed parser."""

import pytest

from tailweave.css import AtRule, Declaration, Root, Rule, is_keyframe_rule, parse_css
from tailweave.errors import CssParseError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule(selector: str, **declarations: str) -> Rule:
    return Rule(
        selector=selector,
        nodes=[Declaration(prop=k.replace("_", "-"), value=v) for k, v in declarations.items()],
    )


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------


class TestPrinting:
    def test_rule(self) -> None:
        assert _rule(".a", color="red").to_css() == ".a {\n  color: red;\n}"

    def test_nested_at_rule(self) -> None:
        media = AtRule(name="media", params="(min-width: 768px)", nodes=[_rule(".a", color="red")])
        assert media.to_css() == (
            "@media (min-width: 768px) {\n"
            "  .a {\n"
            "    color: red;\n"
            "  }\n"
            "}"
        )

    def test_important(self) -> None:
        decl = Declaration(prop="color", value="red", important=True)
        assert decl.to_css() == "color: red !important;"

    def test_blockless_at_rule(self) -> None:
        assert AtRule(name="import", params='"a.css"', has_block=False).to_css() == '@import "a.css";'

    def test_root_joins_children(self) -> None:
        root = Root(nodes=[_rule(".a", color="red"), _rule(".b", color="blue")])
        assert str(root) == ".a {\n  color: red;\n}\n.b {\n  color: blue;\n}"


# ---------------------------------------------------------------------------
# Tree mutation
# ---------------------------------------------------------------------------


class TestTree:
    def test_constructor_sets_parents(self) -> None:
        rule = _rule(".a", color="red")
        root = Root(nodes=[rule])
        assert rule.parent is root
        assert rule.nodes[0].parent is rule

    def test_append_moves_node_between_parents(self) -> None:
        rule = _rule(".a", color="red")
        first = Root(nodes=[rule])
        second = Root()
        second.append(rule)
        assert first.nodes == []
        assert rule.parent is second

    def test_remove_all_detaches(self) -> None:
        rule = _rule(".a", color="red")
        root = Root(nodes=[rule])
        removed = root.remove_all()
        assert removed == [rule]
        assert rule.parent is None
        assert root.nodes == []

    def test_clone_is_deep_and_detached(self) -> None:
        media = AtRule(name="media", params="print", nodes=[_rule(".a", color="red")])
        root = Root(nodes=[media])
        copy = media.clone()
        copy.nodes[0].selector = ".b"
        assert copy.parent is None
        assert media.nodes[0].selector == ".a"
        assert media.parent is root

    def test_walk_rules_is_depth_first(self) -> None:
        root = Root(
            nodes=[
                _rule(".a", color="red"),
                AtRule(name="media", params="print", nodes=[_rule(".b", color="blue")]),
            ]
        )
        assert [r.selector for r in root.walk_rules()] == [".a", ".b"]

    def test_walk_decls_by_property(self) -> None:
        root = Root(nodes=[_rule(".a", color="red", content='""')])
        assert [d.value for d in root.walk_decls("content")] == ['""']


class TestKeyframeRules:
    def test_percentage_selector(self) -> None:
        assert is_keyframe_rule(Rule(selector="0%, 100%"))

    def test_from_to(self) -> None:
        assert is_keyframe_rule(Rule(selector="from"))
        assert is_keyframe_rule(Rule(selector="to"))

    def test_rule_inside_keyframes(self) -> None:
        rule = Rule(selector="anything")
        AtRule(name="-webkit-keyframes", params="spin", nodes=[rule])
        assert is_keyframe_rule(rule)

    def test_class_rule(self) -> None:
        assert not is_keyframe_rule(Rule(selector=".from"))


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseCss:
    def test_rules_and_declarations(self) -> None:
        root = parse_css(".a { color: red; margin: 0 auto }")
        rule = root.nodes[0]
        assert isinstance(rule, Rule)
        assert rule.selector == ".a"
        assert [(d.prop, d.value) for d in rule.nodes] == [("color", "red"), ("margin", "0 auto")]

    def test_media_holds_rules(self) -> None:
        root = parse_css("@media (min-width: 640px) { .a { color: red } }")
        media = root.nodes[0]
        assert isinstance(media, AtRule)
        assert media.name == "media"
        assert media.params == "(min-width: 640px)"
        assert [r.selector for r in media.walk_rules()] == [".a"]

    def test_keyframes_hold_rules(self) -> None:
        root = parse_css("@keyframes spin { from { opacity: 0 } to { opacity: 1 } }")
        rules = root.walk_rules()
        assert [r.selector for r in rules] == ["from", "to"]
        assert all(is_keyframe_rule(r) for r in rules)

    def test_important_flag(self) -> None:
        decl = parse_css(".a { color: red !important }").nodes[0].nodes[0]
        assert decl.important
        assert decl.value == "red"

    def test_comments_skipped(self) -> None:
        root = parse_css("/* x */ .a { /* y */ color: red }")
        assert len(root.nodes) == 1
        assert len(root.nodes[0].nodes) == 1

    def test_rule_without_block_raises(self) -> None:
        with pytest.raises(CssParseError):
            parse_css(".a { color: red } .b")

    def test_round_trip_through_printer(self) -> None:
        source = ".a {\n  color: red;\n}"
        assert parse_css(source).to_css() == source
