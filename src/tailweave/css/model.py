"""CSS rule tree: Root, Rule, AtRule and Declaration nodes with a printer."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from typing import Iterator, Union

__all__ = ["Declaration", "Rule", "AtRule", "Root", "Node", "is_keyframe_rule"]

_KEYFRAME_SELECTOR_RE = re.compile(
    r"^\s*(?:from|to|\d+(?:\.\d+)?%)(?:\s*,\s*(?:from|to|\d+(?:\.\d+)?%))*\s*$",
    re.IGNORECASE,
)


@dataclass(eq=False)
class Declaration:
    """A ``prop: value`` pair."""

    prop: str
    value: str
    important: bool = False
    parent: "Container | None" = field(default=None, repr=False)

    def to_css(self, indent: str = "", step: str = "  ") -> str:
        bang = " !important" if self.important else ""
        return f"{indent}{self.prop}: {self.value}{bang};"


@dataclass(eq=False)
class Container:
    """Base for nodes that hold children."""

    nodes: list["Node"] = field(default_factory=list)
    parent: "Container | None" = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.nodes:
            child.parent = self

    # --- mutation ---------------------------------------------------------------

    def _adopt(self, node: "Node") -> "Node":
        if node.parent is not None and node.parent is not self:
            node.parent.remove(node)
        node.parent = self
        return node

    def append(self, *nodes: "Node") -> "Container":
        for node in nodes:
            self.nodes.append(self._adopt(node))
        return self

    def prepend(self, *nodes: "Node") -> "Container":
        for node in reversed(nodes):
            self.nodes.insert(0, self._adopt(node))
        return self

    def remove(self, node: "Node") -> None:
        self.nodes.remove(node)
        node.parent = None

    def remove_all(self) -> list["Node"]:
        """Detach and return every child."""
        removed, self.nodes = self.nodes, []
        for node in removed:
            node.parent = None
        return removed

    def clone(self) -> "Container":
        """Deep-copy this subtree; the copy has no parent."""
        saved, self.parent = self.parent, None
        try:
            return copy.deepcopy(self)
        finally:
            self.parent = saved

    # --- traversal --------------------------------------------------------------

    def walk(self) -> Iterator["Node"]:
        """Yield every descendant, depth first, in document order."""
        for node in list(self.nodes):
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def walk_rules(self) -> list["Rule"]:
        """Return every descendant style rule in document order."""
        return [n for n in self.walk() if isinstance(n, Rule)]

    def walk_decls(self, prop: str | None = None) -> list[Declaration]:
        return [
            n
            for n in self.walk()
            if isinstance(n, Declaration) and (prop is None or n.prop == prop)
        ]

    # --- printing ---------------------------------------------------------------

    def _block(self, header: str, indent: str, step: str) -> str:
        lines = [f"{indent}{header} {{"]
        lines.extend(child.to_css(indent + step, step) for child in self.nodes)
        lines.append(f"{indent}}}")
        return "\n".join(lines)


@dataclass(eq=False)
class Rule(Container):
    """A style rule: selector text plus declarations (and nested nodes)."""

    selector: str = ""

    def to_css(self, indent: str = "", step: str = "  ") -> str:
        return self._block(self.selector, indent, step)


@dataclass(eq=False)
class AtRule(Container):
    """An at-rule such as ``@media``; ``has_block`` is False for ``@import ...;``."""

    name: str = ""
    params: str = ""
    has_block: bool = True

    def to_css(self, indent: str = "", step: str = "  ") -> str:
        header = f"@{self.name} {self.params}".rstrip()
        if not self.has_block:
            return f"{indent}{header};"
        return self._block(header, indent, step)


@dataclass(eq=False)
class Root(Container):
    """Top of a rule tree."""

    def to_css(self, indent: str = "", step: str = "  ") -> str:
        return "\n".join(child.to_css(indent, step) for child in self.nodes)

    def __str__(self) -> str:
        return self.to_css()


Node = Union[Declaration, Rule, AtRule, Root]


def is_keyframe_rule(rule: Rule) -> bool:
    """True for the ``from``/``to``/``50%`` blocks inside ``@keyframes``."""
    parent = rule.parent
    if isinstance(parent, AtRule) and parent.name.lower().endswith("keyframes"):
        return True
    return bool(_KEYFRAME_SELECTOR_RE.match(rule.selector))
