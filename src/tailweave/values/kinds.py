"""Value kinds: an ordered strategy list of validators for arbitrary values.

Each kind pairs a predicate with the shared normalizer. ``resolve_by_kind``
returns the normalized value or None and never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from tailweave.model.value import ResolvedValue
from tailweave.values.color import is_color
from tailweave.values.normalize import is_css_function, normalize, split_outside_parens

__all__ = [
    "ValueKind",
    "KINDS",
    "SUPPORTED_KINDS",
    "resolve_by_kind",
    "resolve_by_kind_list",
]

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_NUMBER_RE = re.compile(rf"^{_NUMBER}$")
_LENGTH_UNITS = (
    "cm", "mm", "Q", "in", "pc", "pt", "px", "em", "ex", "ch", "rem", "lh",
    "vw", "vh", "vmin", "vmax",
)
_LENGTH_RE = re.compile(rf"^{_NUMBER}(?:{'|'.join(_LENGTH_UNITS)})$")
_ANGLE_RE = re.compile(rf"^{_NUMBER}(?:deg|rad|grad|turn)$")

_GRADIENTS = (
    "linear-gradient(",
    "radial-gradient(",
    "repeating-linear-gradient(",
    "repeating-radial-gradient(",
    "conic-gradient(",
)
_IMAGE_FUNCTIONS = ("element(", "image(", "cross-fade(", "image-set(")
_POSITIONS = frozenset({"center", "top", "right", "bottom", "left"})
_LINE_WIDTHS = frozenset({"thin", "medium", "thick"})
_GENERIC_NAMES = frozenset({
    "serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui",
    "ui-serif", "ui-sans-serif", "ui-monospace", "ui-rounded", "math",
    "emoji", "fangsong",
})
_ABSOLUTE_SIZES = frozenset({
    "xx-small", "x-small", "small", "medium", "large", "x-large", "xx-large",
    "xxx-large",
})
_RELATIVE_SIZES = frozenset({"larger", "smaller"})
_QUOTED_RE = re.compile(r"^(['\"]).+\1$")


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _every_counted(parts: Iterable[str], counts: Callable[[str], bool]) -> bool:
    """All parts are ``var()`` or satisfy *counts*, and at least one counted."""
    counted = 0
    for part in parts:
        part = normalize(part)
        if part.startswith("var("):
            continue
        if not counts(part):
            return False
        counted += 1
    return counted > 0


def is_any(value: str) -> bool:
    return True


def is_url(value: str) -> bool:
    return value.startswith("url(")


def is_number(value: str) -> bool:
    return bool(_NUMBER_RE.match(value)) or is_css_function(value)


def is_percentage(value: str) -> bool:
    return value.endswith("%") or is_css_function(value)


def is_length(value: str) -> bool:
    return value == "0" or bool(_LENGTH_RE.match(value)) or is_css_function(value)


def is_angle(value: str) -> bool:
    return bool(_ANGLE_RE.match(value)) or is_css_function(value)


def is_gradient(value: str) -> bool:
    return normalize(value).startswith(_GRADIENTS)


def is_color_value(value: str) -> bool:
    return _every_counted(split_outside_parens(value, "_"), is_color)


def is_image(value: str) -> bool:
    return _every_counted(
        split_outside_parens(value, ","),
        lambda part: is_url(part) or is_gradient(part) or part.startswith(_IMAGE_FUNCTIONS),
    )


def is_position(value: str) -> bool:
    return _every_counted(
        split_outside_parens(value, "_"),
        lambda part: part in _POSITIONS or is_length(part) or is_percentage(part),
    )


def _is_family(part: str) -> bool:
    if " " in part and not _QUOTED_RE.match(part):
        return False
    return not part[:1].isdigit()


def is_family_name(value: str) -> bool:
    return _every_counted(split_outside_parens(value, ","), _is_family)


def is_generic_name(value: str) -> bool:
    return value in _GENERIC_NAMES


def is_line_width(value: str) -> bool:
    return value in _LINE_WIDTHS


def is_absolute_size(value: str) -> bool:
    return value in _ABSOLUTE_SIZES


def is_relative_size(value: str) -> bool:
    return value in _RELATIVE_SIZES


def _never(value: str) -> bool:
    return False


# ---------------------------------------------------------------------------
# Strategy list
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValueKind:
    """A named validator plus the normalizer applied to values it accepts."""

    name: str
    validate: Callable[[str], bool]
    normalize: Callable[[str], str] = normalize

    def resolve(self, raw: str) -> str | None:
        try:
            accepted = self.validate(raw)
        except (ValueError, IndexError):
            return None
        if not accepted:
            return None
        return self.normalize(raw)


KINDS: dict[str, ValueKind] = {
    kind.name: kind
    for kind in (
        ValueKind("any", is_any),
        ValueKind("color", is_color_value),
        ValueKind("url", is_url),
        ValueKind("image", is_image),
        ValueKind("length", is_length),
        ValueKind("percentage", is_percentage),
        ValueKind("angle", is_angle),
        ValueKind("position", is_position),
        # Theme-only: arbitrary values never validate as a lookup.
        ValueKind("lookup", _never),
        ValueKind("number", is_number),
        ValueKind("generic-name", is_generic_name),
        ValueKind("family-name", is_family_name),
        ValueKind("line-width", is_line_width),
        ValueKind("absolute-size", is_absolute_size),
        ValueKind("relative-size", is_relative_size),
    )
}

SUPPORTED_KINDS = frozenset(KINDS)


def resolve_by_kind(kind: str, raw: str) -> str | None:
    """Validate and normalize *raw* as *kind*; None if invalid or unknown kind."""
    strategy = KINDS.get(kind)
    if strategy is None:
        return None
    return strategy.resolve(raw)


def resolve_by_kind_list(kinds: Iterable[str], raw: str) -> ResolvedValue | None:
    """Try *kinds* in order and return the first match with its kind."""
    for kind in kinds:
        value = resolve_by_kind(kind, raw)
        if value is not None:
            return ResolvedValue(value=value, kind=kind)
    return None
