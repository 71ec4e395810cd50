"""Lark Transformer that converts a selector parse tree into the selector AST."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from tailweave.errors import SelectorParseError
from tailweave.selector.escape import unescape
from tailweave.selector.model import (
    ATTRIBUTE,
    CLASS,
    ID,
    NESTING,
    PSEUDO,
    TAG,
    UNIVERSAL,
    Compound,
    Selector,
    SelectorList,
    SimpleSelector,
)

__all__ = ["parse_selector"]

GRAMMAR_PATH = Path(__file__).parent / "selector.lark"


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into selector AST nodes."""

    # ---- simple selectors ----

    def class_name(self, items: list[Token]) -> SimpleSelector:
        raw = str(items[0])
        return SimpleSelector(kind=CLASS, value=unescape(raw), raw=raw)

    def id_name(self, items: list[Token]) -> SimpleSelector:
        raw = str(items[0])
        return SimpleSelector(kind=ID, value=unescape(raw), raw=raw)

    def tag(self, items: list[Token]) -> SimpleSelector:
        raw = str(items[0])
        return SimpleSelector(kind=TAG, value=unescape(raw), raw=raw)

    def universal(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=UNIVERSAL, value="*")

    def nesting(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind=NESTING, value="&")

    def attribute(self, items: list[Token]) -> SimpleSelector:
        raw = str(items[0])
        return SimpleSelector(kind=ATTRIBUTE, value=raw, raw=raw)

    def pseudo(self, items: list[Token]) -> SimpleSelector:
        arguments = str(items[2]) if len(items) > 2 else ""
        return SimpleSelector(kind=PSEUDO, value=str(items[0]) + str(items[1]), arguments=arguments)

    # ---- structural ----

    def compound(self, items: list[SimpleSelector]) -> Compound:
        return Compound(nodes=list(items))

    def selector(self, items: list[object]) -> Selector:
        return Selector(parts=[str(i) if isinstance(i, Token) else i for i in items])  # type: ignore[misc]

    def selector_list(self, items: list[object]) -> SelectorList:
        selectors = [i for i in items if isinstance(i, Selector)]
        separators = [str(i) for i in items if isinstance(i, Token)]
        return SelectorList(selectors=selectors, separators=separators)

    def start(self, items: list[SelectorList]) -> SelectorList:
        return items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_selector(text: str) -> SelectorList:
    """Parse selector text into a mutable :class:`SelectorList`.

    Leading and trailing whitespace is kept on the list so that
    ``parse_selector(s).serialize() == s``.
    """
    body = text.strip()
    if not body:
        raise SelectorParseError(f"Empty selector: {text!r}")
    try:
        tree = _parser().parse(body)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(str(e), line=line, column=column) from e
    result: SelectorList = SelectorTransformer().transform(tree)
    start = text.index(body)
    result.leading = text[:start]
    result.trailing = text[start + len(body):]
    return result
