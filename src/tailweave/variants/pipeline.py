"""Rule transform pipeline: apply selector transforms to a rule subtree."""

from __future__ import annotations

from typing import Callable

from tailweave.css.model import AtRule, Container, Rule, is_keyframe_rule
from tailweave.variants.rewrite import ClassRewrite, rewrite_all_classes, rewrite_last_classes

__all__ = [
    "SelectorTransform",
    "VariantTransform",
    "split_selectors",
    "transform_rules",
    "transform_all_selectors",
    "transform_all_classes",
    "transform_last_classes",
]

SelectorTransform = Callable[[str], "str | None"]
VariantTransform = Callable[[Container], None]


def split_selectors(selector: str) -> list[str]:
    """Split selector text on commas that are neither escaped nor nested."""
    chunks: list[str] = []
    current = ""
    depth = 0
    escaped = False
    for ch in selector:
        if escaped:
            current += ch
            escaped = False
            continue
        if ch == "\\":
            escaped = True
        elif ch in "([":
            depth += 1
        elif ch in ")]" and depth:
            depth -= 1
        elif ch == "," and depth == 0:
            chunks.append(current)
            current = ""
            continue
        current += ch
    chunks.append(current)
    return chunks


def transform_rules(
    container: Container,
    transform_selector: SelectorTransform,
    wrap: Callable[[], AtRule] | None = None,
    before_emit: Callable[[Rule], None] | None = None,
) -> Container:
    """Rewrite every rule under *container* in place.

    Keyframe blocks are skipped. Each comma-separated piece of a selector is
    transformed on its own; pieces that come back as None are dropped, and a
    rule with no pieces left is removed. After all rewrites, *wrap* (if given)
    creates an at-rule that takes over every child of *container*.
    """
    for rule in container.walk_rules():
        if is_keyframe_rule(rule):
            continue
        pieces = [transform_selector(piece) for piece in split_selectors(rule.selector)]
        kept = [p for p in pieces if p is not None]
        if not kept:
            if rule.parent is not None:
                rule.parent.remove(rule)
            continue
        rule.selector = ",".join(kept)
        if before_emit is not None:
            before_emit(rule)

    if wrap is not None:
        wrapper = wrap()
        wrapper.append(*container.remove_all())
        container.append(wrapper)
    return container


def transform_all_selectors(
    transform_selector: SelectorTransform,
    wrap: Callable[[], AtRule] | None = None,
    before_emit: Callable[[Rule], None] | None = None,
) -> VariantTransform:
    """Build a variant transform from a per-selector function."""

    def apply(container: Container) -> None:
        transform_rules(container, transform_selector, wrap=wrap, before_emit=before_emit)

    return apply


def transform_all_classes(
    rewrite: ClassRewrite,
    wrap: Callable[[], AtRule] | None = None,
    before_emit: Callable[[Rule], None] | None = None,
) -> VariantTransform:
    return transform_all_selectors(
        lambda selector: rewrite_all_classes(selector, rewrite),
        wrap=wrap,
        before_emit=before_emit,
    )


def transform_last_classes(
    rewrite: ClassRewrite,
    wrap: Callable[[], AtRule] | None = None,
    before_emit: Callable[[Rule], None] | None = None,
) -> VariantTransform:
    return transform_all_selectors(
        lambda selector: rewrite_last_classes(selector, rewrite),
        wrap=wrap,
        before_emit=before_emit,
    )
