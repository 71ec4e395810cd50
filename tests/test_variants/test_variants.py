"""Tests for selector rewriting, the rule transform pipeline and built-in variants."""

import logging

import pytest

from tailweave.css import AtRule, Declaration, Root, Rule
from tailweave.errors import UnknownVariantError
from tailweave.model import GenerationConfig
from tailweave.selector import parse_selector
from tailweave.variants import (
    VariantRegistry,
    build_media_query,
    merge_marker_state,
    prefix_selector,
    register_builtin_variants,
    rewrite_all_classes,
    rewrite_last_classes,
    split_selectors,
    transform_all_classes,
    transform_rules,
    with_pseudo,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _root(*selectors: str) -> Root:
    return Root(
        nodes=[
            Rule(selector=s, nodes=[Declaration(prop="color", value="red")]) for s in selectors
        ]
    )


def _registry(**config) -> VariantRegistry:
    return register_builtin_variants(VariantRegistry(), GenerationConfig(**config))


def _selectors(root: Root) -> list[str]:
    return [r.selector for r in root.walk_rules()]


def _join(marker: str, remainder: str) -> str:
    return f"{marker} {remainder.lstrip()}"


# ---------------------------------------------------------------------------
# Class rewriting
# ---------------------------------------------------------------------------


class TestRewriteAllClasses:
    def test_every_class_renamed(self) -> None:
        assert rewrite_all_classes(".a .b", lambda c: "x:" + c) == ".x\\:a .x\\:b"

    def test_with_pseudo_inserts_after_class(self) -> None:
        result = rewrite_all_classes(".a", lambda c: with_pseudo("hover:" + c, ":hover"))
        assert result == ".hover\\:a:hover"

    def test_pseudo_class_lands_before_pseudo_element(self) -> None:
        result = rewrite_all_classes(
            ".a::placeholder", lambda c: with_pseudo("focus:" + c, ":focus")
        )
        assert result == ".focus\\:a:focus::placeholder"

    def test_class_count_preserved(self) -> None:
        selector = ".a.b > .c:not(.d), .e"
        result = rewrite_all_classes(selector, lambda c: with_pseudo("v:" + c, ":hover"))
        assert parse_selector(result).class_count() == parse_selector(selector).class_count()

    def test_non_class_nodes_untouched(self) -> None:
        assert rewrite_all_classes("div > [data-x] *", lambda c: "x:" + c) == "div > [data-x] *"

    def test_escaped_comma_reescaped(self) -> None:
        result = rewrite_all_classes(".a\\,b", lambda c: "x:" + c)
        assert result == ".x\\:a\\2c b"
        assert len(split_selectors(result)) == 1


class TestRewriteLastClasses:
    def test_only_last_class_per_selector(self) -> None:
        assert rewrite_last_classes(".a .b, .c", lambda c: "x:" + c) == ".a .x\\:b, .x\\:c"

    def test_compound_last_class(self) -> None:
        assert rewrite_last_classes(".a.b", lambda c: "x:" + c) == ".a.x\\:b"

    def test_selector_without_class_untouched(self) -> None:
        assert rewrite_last_classes("div", lambda c: "x:" + c) == "div"


class TestPrefixSelector:
    def test_prefix(self) -> None:
        assert prefix_selector("tw-", ".group") == ".tw-group"

    def test_no_prefix(self) -> None:
        assert prefix_selector("", ".group") == ".group"


# ---------------------------------------------------------------------------
# Marker state merging
# ---------------------------------------------------------------------------


class TestMergeMarkerState:
    def test_marker_without_state(self) -> None:
        result = merge_marker_state(".group-hover\\:a", ".group", "hover", _join)
        assert result == ".group:hover .group-hover\\:a"

    def test_existing_states_read_back(self) -> None:
        result = merge_marker_state(".group:hover .x", ".group", "focus", _join)
        assert result == ".group:hover:focus .x"

    def test_duplicate_state_dropped(self) -> None:
        assert merge_marker_state(".group:hover .x", ".group", "hover", _join) == ".group:hover .x"

    def test_order_makes_merge_stable(self) -> None:
        order = ["hover", "focus"]
        a = merge_marker_state(".group:hover .x", ".group", "focus", _join, order=order)
        b = merge_marker_state(".group:focus .x", ".group", "hover", _join, order=order)
        assert a == b == ".group:hover:focus .x"


# ---------------------------------------------------------------------------
# Rule transform pipeline
# ---------------------------------------------------------------------------


class TestSplitSelectors:
    def test_top_level_commas(self) -> None:
        assert split_selectors(".a, .b") == [".a", " .b"]

    def test_escaped_comma_kept(self) -> None:
        assert split_selectors(".a\\,b, .c") == [".a\\,b", " .c"]

    def test_nested_comma_kept(self) -> None:
        assert split_selectors(":is(.a, .b), [data-x='1,2']") == [":is(.a, .b)", " [data-x='1,2']"]


class TestTransformRules:
    def test_each_piece_transformed(self) -> None:
        root = _root(".a, .b")
        transform_rules(root, lambda s: s.strip() + ":hover")
        assert _selectors(root) == [".a:hover,.b:hover"]

    def test_none_pieces_dropped(self) -> None:
        root = _root(".a, .b")
        transform_rules(root, lambda s: None if "b" in s else s)
        assert _selectors(root) == [".a"]

    def test_rule_removed_when_every_piece_dropped(self) -> None:
        root = _root(".a", ".b")
        transform_rules(root, lambda s: None if s == ".a" else s)
        assert _selectors(root) == [".b"]

    def test_keyframes_skipped(self) -> None:
        keyframes = AtRule(
            name="keyframes",
            params="spin",
            nodes=[Rule(selector="0%, 100%", nodes=[Declaration(prop="opacity", value="0")])],
        )
        root = Root(nodes=[keyframes, Rule(selector=".a")])
        transform_all_classes(lambda c: "x:" + c)(root)
        assert _selectors(root) == ["0%, 100%", ".x\\:a"]

    def test_wrap_takes_every_child(self) -> None:
        root = _root(".a", ".b")
        transform_rules(root, lambda s: s, wrap=lambda: AtRule(name="media", params="print"))
        assert len(root.nodes) == 1
        wrapper = root.nodes[0]
        assert isinstance(wrapper, AtRule)
        assert _selectors(wrapper) == [".a", ".b"]

    def test_before_emit_runs_once_per_rule(self) -> None:
        seen: list[str] = []
        root = _root(".a", ".b")
        transform_rules(root, lambda s: s + ":x", before_emit=lambda rule: seen.append(rule.selector))
        assert seen == [".a:x", ".b:x"]

    def test_deterministic(self) -> None:
        def run() -> str:
            root = _root(".a .b, .c")
            transform_all_classes(lambda c: with_pseudo("hover:" + c, ":hover"))(root)
            return root.to_css()

        assert run() == run()


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


class TestBuildMediaQuery:
    def test_string(self) -> None:
        assert build_media_query("640px") == "(min-width: 640px)"

    def test_range(self) -> None:
        assert build_media_query({"min": "640px", "max": "767px"}) == (
            "(min-width: 640px) and (max-width: 767px)"
        )

    def test_raw(self) -> None:
        assert build_media_query({"raw": "print"}) == "print"

    def test_list(self) -> None:
        assert build_media_query(["640px", {"max": "100px"}]) == (
            "(min-width: 640px), (max-width: 100px)"
        )


# ---------------------------------------------------------------------------
# Registry and built-in variants
# ---------------------------------------------------------------------------


class TestVariantRegistry:
    def test_unknown_variant(self) -> None:
        with pytest.raises(UnknownVariantError):
            VariantRegistry().get("nope")

    def test_apply_does_not_mutate_input(self) -> None:
        root = _root(".a")
        _registry().apply("hover", root)
        assert _selectors(root) == [".a"]

    def test_registration_order(self) -> None:
        names = _registry().names()
        assert names.index("before") < names.index("hover") < names.index("md")
        assert "group-hover" in names
        assert "peer-checked" in names


class TestPseudoVariants:
    def test_hover(self) -> None:
        assert _selectors(_registry().apply("hover", _root(".a"))) == [".hover\\:a:hover"]

    def test_odd(self) -> None:
        assert _selectors(_registry().apply("odd", _root(".a"))) == [".odd\\:a:nth-child(odd)"]

    def test_before_adds_content(self) -> None:
        result = _registry().apply("before", _root(".a"))
        rule = result.walk_rules()[0]
        assert rule.selector == ".before\\:a::before"
        assert [(d.prop, d.value) for d in rule.nodes] == [("content", '""'), ("color", "red")]

    def test_marker_emits_descendant_and_own_rule(self) -> None:
        assert _selectors(_registry().apply("marker", _root(".a"))) == [
            ".marker\\:a *::marker",
            ".marker\\:a::marker",
        ]

    def test_custom_separator(self) -> None:
        result = _registry(separator="_").apply("hover", _root(".a"))
        assert _selectors(result) == [".hover_a:hover"]


class TestRelationalVariants:
    def test_group_hover(self) -> None:
        result = _registry().apply("group-hover", _root(".a"))
        assert _selectors(result) == [".group:hover .group-hover\\:a"]

    def test_peer_checked(self) -> None:
        result = _registry().apply("peer-checked", _root(".a"))
        assert _selectors(result) == [".peer:checked ~ .peer-checked\\:a"]

    def test_stacked_group_states_merge(self) -> None:
        registry = _registry()
        first = registry.apply("group-focus", registry.apply("group-hover", _root(".a")))
        second = registry.apply("group-hover", registry.apply("group-focus", _root(".a")))
        for result in (first, second):
            (selector,) = _selectors(result)
            assert selector.split(" ")[0] == ".group:hover:focus"

    def test_marker_itself_never_renamed(self) -> None:
        result = _registry().apply("group-hover", _root(".group .a"))
        assert _selectors(result) == [".group:hover .group .group-hover\\:a"]

    def test_nothing_but_marker_suppressed(self) -> None:
        assert _registry().apply("group-hover", _root(".group")) is None

    def test_prefixed_marker(self) -> None:
        result = _registry(prefix="tw-").apply("group-hover", _root(".tw-a"))
        assert _selectors(result) == [".tw-group:hover .group-hover\\:tw-a"]


class TestConditionalVariants:
    def test_screen_wraps_in_media(self) -> None:
        result = _registry().apply("md", _root(".a"))
        (media,) = result.nodes
        assert isinstance(media, AtRule)
        assert media.params == "(min-width: 768px)"
        assert _selectors(media) == [".md\\:a"]

    def test_screen_rewrites_last_class_only(self) -> None:
        result = _registry().apply("md", _root(".group:hover .group-hover\\:a"))
        assert _selectors(result) == [".group:hover .md\\:group-hover\\:a"]

    def test_motion_safe(self) -> None:
        (media,) = _registry().apply("motion-safe", _root(".a")).nodes
        assert media.params == "(prefers-reduced-motion: no-preference)"

    def test_direction(self) -> None:
        assert _selectors(_registry().apply("rtl", _root(".a"))) == ['[dir="rtl"] .rtl\\:a']

    def test_dark_media(self) -> None:
        (media,) = _registry().apply("dark", _root(".a")).nodes
        assert media.params == "(prefers-color-scheme: dark)"
        assert _selectors(media) == [".dark\\:a"]

    def test_dark_class(self) -> None:
        result = _registry(dark_mode="class").apply("dark", _root(".a"))
        assert _selectors(result) == [".dark .dark\\:a"]

    def test_dark_false_warns_and_uses_media(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            registry = _registry(dark_mode=False)
        assert "dark_mode" in caplog.text
        (media,) = registry.apply("dark", _root(".a")).nodes
        assert media.params == "(prefers-color-scheme: dark)"

    def test_unknown_dark_mode_not_registered(self) -> None:
        assert "dark" not in _registry(dark_mode="sometimes")

    def test_custom_screens(self) -> None:
        theme = GenerationConfig().theme.merged(overrides={"screens": {"tablet": "640px"}})
        registry = _registry(theme=theme)
        assert "tablet" in registry
        assert "md" not in registry
