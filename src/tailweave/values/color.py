"""Colour parsing and formatting for alpha composition."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Callable

from tinycss2.color3 import RGBA
from tinycss2.color3 import parse_color as parse_css3_color

__all__ = [
    "ParsedColor",
    "parse_color",
    "format_color",
    "is_color",
    "with_alpha_value",
    "with_alpha_variable",
    "to_color_value",
]

_HEX_RE = re.compile(r"^#([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})?$", re.IGNORECASE)
_SHORT_HEX_RE = re.compile(r"^#([a-f\d])([a-f\d])([a-f\d])([a-f\d])?$", re.IGNORECASE)
_VALUE = r"(?:\d+|\d*\.\d+)%?"
_HUE = r"(?:\d+|\d*\.\d+)(?:deg|rad|grad|turn)?"
_SEP = r"(?:\s*,\s*|\s+)"
_ALPHA_SEP = r"\s*[,/]\s*"
_RGB_HSL_RE = re.compile(
    rf"^(rgb|hsl)a?\(\s*({_HUE}){_SEP}({_VALUE}){_SEP}({_VALUE})(?:{_ALPHA_SEP}({_VALUE}))?\s*\)$"
)
_KEYWORD_RE = re.compile(r"^[a-zA-Z]+$")

ColorFunction = Callable[..., str]


@dataclass(frozen=True)
class ParsedColor:
    mode: str  # "rgb" or "hsl"
    channels: tuple[str, str, str]
    alpha: str | None = None


def _format_number(number: float) -> str:
    if number == int(number):
        return str(int(number))
    return repr(number)


def parse_color(value: Any) -> ParsedColor | None:
    """Parse hex, ``rgb()/hsl()`` and named colours; None for anything else."""
    if not isinstance(value, str):
        return None
    value = value.strip()

    if _KEYWORD_RE.match(value):
        named = parse_css3_color(value)
        if not isinstance(named, RGBA):
            return None
        channels = tuple(str(round(c * 255)) for c in named[:3])
        alpha = None if named.alpha == 1 else _format_number(named.alpha)
        return ParsedColor("rgb", channels, alpha)  # type: ignore[arg-type]

    short = _SHORT_HEX_RE.match(value)
    if short is not None:
        r, g, b, a = short.groups()
        value = "#" + r * 2 + g * 2 + b * 2 + (a * 2 if a else "")

    hex_match = _HEX_RE.match(value)
    if hex_match is not None:
        r, g, b, a = hex_match.groups()
        channels = (str(int(r, 16)), str(int(g, 16)), str(int(b, 16)))
        alpha = _format_number(int(a, 16) / 255) if a else None
        return ParsedColor("rgb", channels, alpha)

    match = _RGB_HSL_RE.match(value)
    if match is not None:
        return ParsedColor(match.group(1), (match.group(2), match.group(3), match.group(4)), match.group(5))
    return None


def is_color(value: str) -> bool:
    """True for anything :func:`parse_color` accepts, plus ``currentColor``."""
    return value.lower() == "currentcolor" or parse_color(value) is not None


def format_color(color: ParsedColor) -> str:
    alpha = f" / {color.alpha}" if color.alpha is not None else ""
    return f"{color.mode}({' '.join(color.channels)}{alpha})"


def to_color_value(color: Any) -> str:
    """Render a theme colour, calling colour functions with no opacity."""
    return color() if callable(color) else color


def with_alpha_value(color: Any, alpha: str, default: str | None = None) -> str | None:
    """Return *color* as a literal with its alpha channel set to *alpha*."""
    if callable(color):
        return color(opacity_value=alpha)
    parsed = parse_color(color)
    if parsed is None:
        return default
    return format_color(replace(parsed, alpha=alpha))


def with_alpha_variable(color: Any, property: str, variable: str) -> dict[str, str]:
    """Express *color* through an opacity custom property.

    Colours that already carry an alpha channel, or cannot be parsed, are
    emitted as a single literal declaration.
    """
    if callable(color):
        return {
            variable: "1",
            property: color(opacity_variable=variable, opacity_value=f"var({variable})"),
        }
    parsed = parse_color(color)
    if parsed is None or parsed.alpha is not None:
        return {property: color}
    return {variable: "1", property: format_color(replace(parsed, alpha=f"var({variable})"))}
