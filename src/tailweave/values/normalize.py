"""Normalization of arbitrary (bracketed) values."""

from __future__ import annotations

import re

__all__ = ["normalize", "is_css_function", "split_outside_parens"]

_URL_SPLIT_RE = re.compile(r"(url\(.*?\))")
_URL_RE = re.compile(r"^url\(.*?\)$")
_UNDERSCORE_RUN_RE = re.compile(r"([^\\])_+")
_MATH_FUNCTIONS = ("calc(", "min(", "max(", "clamp(")
_MATH_FUNCTION_RE = re.compile(r"^(?:min|max|clamp|calc)\(.*\)$")
# An operand (number with optional unit, or a closing paren) directly followed
# by an operator.
_OPERATOR_RE = re.compile(r"(-?\d*\.?\d(?!\b-.+[,)](?![^+\-/*])\D)(?:%|[a-z]+)?|\))([+\-/*])")


def is_css_function(value: str) -> bool:
    """True for ``calc()``, ``min()``, ``max()`` and ``clamp()`` expressions."""
    return bool(_MATH_FUNCTION_RE.match(value))


def normalize(value: str, is_root: bool = True) -> str:
    """Turn an arbitrary value as written in a class name into CSS.

    ``_`` becomes a space (``\\_`` stays a literal underscore), ``url()``
    segments are left alone and operators inside math functions get spaces.
    """
    if "url(" in value:
        return "".join(
            part if _URL_RE.match(part) else normalize(part, False)
            for part in _URL_SPLIT_RE.split(value)
            if part
        )

    value = _UNDERSCORE_RUN_RE.sub(
        lambda m: m.group(1) + " " * (len(m.group(0)) - 1), value
    )
    if value.startswith("_"):
        value = " " + value[1:]
    value = value.replace("\\_", "_")

    if is_root:
        value = value.strip()

    if any(fn in value for fn in _MATH_FUNCTIONS):
        value = _OPERATOR_RE.sub(r"\1 \2 ", value)
    return value


def split_outside_parens(value: str, separator: str) -> list[str]:
    """Split on *separator* characters that are not inside parentheses."""
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in value:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        if ch == separator and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += ch
    parts.append(current)
    return parts
