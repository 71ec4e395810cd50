"""Build a rule tree from CSS source using tinycss2."""

from __future__ import annotations

import tinycss2
from tinycss2 import ast

from tailweave.css.model import AtRule, Declaration, Root, Rule
from tailweave.errors import CssParseError

__all__ = ["parse_css"]

# At-rules whose block holds rules rather than declarations.
_RULE_LIST_AT_RULES = {"media", "supports", "layer", "container", "document", "scope"}


def _raise(error: ast.ParseError) -> None:
    raise CssParseError(
        f"{error.kind}: {error.message}", line=error.source_line, column=error.source_column
    )


def _declarations(tokens: list) -> list[Declaration]:
    decls: list[Declaration] = []
    for item in tinycss2.parse_declaration_list(tokens, skip_comments=True, skip_whitespace=True):
        if isinstance(item, ast.ParseError):
            _raise(item)
        elif isinstance(item, ast.Declaration):
            decls.append(
                Declaration(
                    prop=item.name,
                    value=tinycss2.serialize(item.value).strip(),
                    important=item.important,
                )
            )
    return decls


def _convert(node: object) -> Rule | AtRule | None:
    if isinstance(node, ast.ParseError):
        _raise(node)
    if isinstance(node, ast.QualifiedRule):
        return Rule(
            selector=tinycss2.serialize(node.prelude).strip(),
            nodes=list(_declarations(node.content)),
        )
    if isinstance(node, ast.AtRule):
        name = node.lower_at_keyword
        params = tinycss2.serialize(node.prelude).strip()
        if node.content is None:
            return AtRule(name=name, params=params, has_block=False)
        if name in _RULE_LIST_AT_RULES or name.endswith("keyframes"):
            children = tinycss2.parse_rule_list(
                node.content, skip_comments=True, skip_whitespace=True
            )
            nodes = [c for c in (_convert(child) for child in children) if c is not None]
        else:
            nodes = list(_declarations(node.content))
        return AtRule(name=name, params=params, nodes=nodes)
    return None


def parse_css(source: str) -> Root:
    """Parse *source* into a :class:`Root`; raises CssParseError on malformed input."""
    root = Root()
    for node in tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True):
        converted = _convert(node)
        if converted is not None:
            root.append(converted)
    return root
