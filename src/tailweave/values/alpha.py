"""Colour alpha composition: literal colours or opacity-variable declarations."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from tailweave.values.color import (
    format_color,
    parse_color,
    to_color_value,
    with_alpha_value,
    with_alpha_variable,
)

__all__ = ["compose_alpha"]


def compose_alpha(
    color: Any,
    alpha: str | None,
    property: str,
    variable: str,
    opacity_plugin_active: bool,
) -> dict[str, str] | None:
    """Return the declarations that paint *property* with *color* at *alpha*.

    Without the companion opacity plugin the result is a single literal
    declaration. With it, *variable* holds the alpha (``1`` when none was
    given) and *property* references ``var(variable)`` so an opacity utility
    can override just the variable. None means no rule should be emitted.
    """
    if not opacity_plugin_active:
        if alpha is None:
            return {property: to_color_value(color)}
        literal = with_alpha_value(color, alpha)
        if literal is None:
            return None
        return {property: literal}

    if alpha is None:
        return with_alpha_variable(color, property, variable)

    if callable(color):
        return {
            variable: alpha,
            property: color(opacity_variable=variable, opacity_value=f"var({variable})"),
        }
    parsed = parse_color(color)
    if parsed is None:
        return None
    return {variable: alpha, property: format_color(replace(parsed, alpha=f"var({variable})"))}
