"""Selector rewrite primitives used by variants.

A rewrite callback receives an (unescaped) class name and returns either the
new class name or a :class:`WithPseudo` asking for a pseudo node to be
inserted after the class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Union

from tailweave.selector import SimpleSelector, escape_commas, parse_selector
from tailweave.selector.model import Compound

__all__ = [
    "WithPseudo",
    "with_pseudo",
    "ClassRewrite",
    "rewrite_all_classes",
    "rewrite_last_classes",
    "merge_marker_state",
    "prefix_selector",
]


@dataclass(frozen=True)
class WithPseudo:
    """Rename to *class_name* and insert *pseudo* (``":hover"``, ``"::before"``)."""

    class_name: str
    pseudo: str


def with_pseudo(class_name: str, pseudo: str) -> WithPseudo:
    return WithPseudo(class_name, pseudo)


ClassRewrite = Callable[[str], Union[str, WithPseudo]]


def _rewrite_node(node: SimpleSelector, compound: Compound, rewrite: ClassRewrite) -> None:
    result = rewrite(node.value)
    if isinstance(result, WithPseudo):
        compound.insert_after(node, SimpleSelector.pseudo(result.pseudo))
        result = result.class_name
    node.rename(result)
    if node.raw is not None:
        node.raw = escape_commas(node.raw)


def rewrite_all_classes(selector: str, rewrite: ClassRewrite) -> str:
    """Pass every class in *selector* through *rewrite* and return the new text."""
    ast = parse_selector(selector)
    ast.walk_classes(lambda node, compound: _rewrite_node(node, compound, rewrite))
    return ast.serialize()


def rewrite_last_classes(selector: str, rewrite: ClassRewrite) -> str:
    """Rewrite only the last class of each comma-separated selector.

    Selectors without any class are left as they are.
    """
    ast = parse_selector(selector)
    for complex_selector in ast.selectors:
        last: tuple[SimpleSelector, Compound] | None = None
        for compound in complex_selector.compounds:
            for node in compound.classes():
                last = (node, compound)
        if last is not None:
            _rewrite_node(last[0], last[1], rewrite)
    return ast.serialize()


def merge_marker_state(
    selector: str,
    marker: str,
    state: str,
    join: Callable[[str, str], str],
    order: Sequence[str] | None = None,
) -> str:
    """Attach pseudo-*state* to *marker* and hand the result to *join*.

    When *selector* already holds the marker with states (``.group:focus``),
    those states are read back, *state* is appended, the old token is removed
    and ``join(".group:<states>", remainder)`` is returned. Otherwise the
    result is ``join(marker + ":" + state, selector)``.

    Duplicate states are dropped. With *order*, states are sorted by their
    position in it (unknown states last, in arrival order), which makes the
    result independent of the order in which states were applied.
    """
    states = [state]
    index = selector.find(marker + ":")
    if index != -1:
        end = selector.find(" ", index)
        if end == -1:
            end = len(selector)
        existing = selector[index:end]
        states = existing[len(marker) + 1:].split(":") + states
        selector = selector[:index] + selector[end:]

    merged: list[str] = []
    for s in states:
        if s and s not in merged:
            merged.append(s)
    if order is not None:
        rank = {name: i for i, name in enumerate(order)}
        merged.sort(key=lambda s: rank.get(s, len(rank)))

    return join(":".join([marker, *merged]), selector)


def prefix_selector(prefix: str, selector: str) -> str:
    """Prefix every class in *selector* (``.group`` -> ``.tw-group``)."""
    if not prefix:
        return selector
    return rewrite_all_classes(selector, lambda class_name: prefix + class_name)
