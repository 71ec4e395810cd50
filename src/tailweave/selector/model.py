"""Selector AST: SelectorList -> Selector -> Compound -> SimpleSelector.

Nodes are created per parse, mutated in place by a rewrite pass and then
serialized; nothing holds on to them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from tailweave.selector.escape import escape_class_name

__all__ = ["SimpleSelector", "Compound", "Selector", "SelectorList"]

# SimpleSelector.kind values
CLASS = "class"
ID = "id"
TAG = "tag"
UNIVERSAL = "universal"
NESTING = "nesting"
ATTRIBUTE = "attribute"
PSEUDO = "pseudo"


@dataclass(eq=False)
class SimpleSelector:
    """One simple selector.

    For class and id nodes ``value`` is the unescaped name and ``raw`` the text
    as written; renaming through :meth:`rename` re-escapes. Pseudo nodes keep
    their colons in ``value`` (``":hover"``, ``"::before"``) and any
    parenthesised argument text, unparsed, in ``arguments``.
    """

    kind: str
    value: str
    raw: str | None = None
    arguments: str = ""

    @property
    def is_pseudo_element(self) -> bool:
        return self.kind == PSEUDO and self.value.startswith("::")

    def rename(self, value: str) -> None:
        if value == self.value:
            return
        self.value = value
        self.raw = escape_class_name(value)

    def serialize(self) -> str:
        if self.kind == CLASS:
            return "." + (self.raw if self.raw is not None else escape_class_name(self.value))
        if self.kind == ID:
            return "#" + (self.raw if self.raw is not None else escape_class_name(self.value))
        if self.kind == UNIVERSAL:
            return "*"
        if self.kind == NESTING:
            return "&"
        if self.kind == PSEUDO:
            return self.value + self.arguments
        return self.raw if self.raw is not None else self.value

    @classmethod
    def pseudo(cls, value: str) -> "SimpleSelector":
        """Build a pseudo node from ``":state"``, ``"::element"`` or ``":fn(args)"``."""
        name, paren, rest = value.partition("(")
        return cls(kind=PSEUDO, value=name, arguments=paren + rest if paren else "")


@dataclass(eq=False)
class Compound:
    """A run of simple selectors with no combinator between them."""

    nodes: list[SimpleSelector] = field(default_factory=list)

    def classes(self) -> list[SimpleSelector]:
        return [n for n in self.nodes if n.kind == CLASS]

    def insert_after(self, node: SimpleSelector, new_node: SimpleSelector) -> None:
        """Insert *new_node* after *node*.

        Pseudo-elements go to the end of the compound; pseudo-classes go right
        after *node* but ahead of any pseudo-element that follows it.
        """
        if new_node.is_pseudo_element:
            self.nodes.append(new_node)
            return
        self.nodes.insert(self.nodes.index(node) + 1, new_node)

    def serialize(self) -> str:
        return "".join(n.serialize() for n in self.nodes)


@dataclass(eq=False)
class Selector:
    """A complex selector: compounds joined by raw combinator text.

    ``parts`` alternates ``Compound`` and combinator strings (``" "``,
    ``" > "``); it may start with a combinator for relative selectors.
    """

    parts: list[Compound | str] = field(default_factory=list)

    @property
    def compounds(self) -> list[Compound]:
        return [p for p in self.parts if isinstance(p, Compound)]

    def serialize(self) -> str:
        return "".join(p if isinstance(p, str) else p.serialize() for p in self.parts)


@dataclass(eq=False)
class SelectorList:
    """Comma-separated selectors plus the raw text around them."""

    selectors: list[Selector] = field(default_factory=list)
    separators: list[str] = field(default_factory=list)
    leading: str = ""
    trailing: str = ""

    def compounds(self) -> Iterator[Compound]:
        for selector in self.selectors:
            yield from selector.compounds

    def walk_classes(self, visitor: Callable[[SimpleSelector, Compound], None]) -> None:
        """Call *visitor* for every class node, in document order."""
        for compound in self.compounds():
            for node in list(compound.nodes):
                if node.kind == CLASS:
                    visitor(node, compound)

    def walk(self, visitor: Callable[[SimpleSelector, Compound], None]) -> None:
        """Call *visitor* for every simple selector, in document order."""
        for compound in self.compounds():
            for node in list(compound.nodes):
                visitor(node, compound)

    def class_count(self) -> int:
        return sum(len(c.classes()) for c in self.compounds())

    def serialize(self) -> str:
        out = [self.leading]
        for i, selector in enumerate(self.selectors):
            if i:
                out.append(self.separators[i - 1])
            out.append(selector.serialize())
        out.append(self.trailing)
        return "".join(out)

    def __str__(self) -> str:
        return self.serialize()
