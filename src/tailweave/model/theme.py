"""Theme model: read-only per-category value tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

__all__ = ["Theme", "flatten_palette", "default_theme"]

# Categories that fall back to another category when not configured.
_FALLBACKS: dict[str, str] = {
    "background_color": "colors",
    "text_color": "colors",
    "border_color": "colors",
    "placeholder_color": "colors",
    "divide_color": "border_color",
    "fill": "colors",
    "stroke": "colors",
    "caret_color": "colors",
    "accent_color": "colors",
    "gradient_color_stops": "colors",
    "background_opacity": "opacity",
    "text_opacity": "opacity",
    "border_opacity": "opacity",
    "placeholder_opacity": "opacity",
    "divide_opacity": "border_opacity",
    "divide_width": "border_width",
    "margin": "spacing",
    "padding": "spacing",
    "width": "spacing",
    "height": "spacing",
}


def flatten_palette(colors: Mapping[str, Any] | None) -> dict[str, Any]:
    """Flatten a nested colour palette into dash-joined keys.

    ``{"red": {"500": "#ef4444", "DEFAULT": "#f00"}}`` becomes
    ``{"red-500": "#ef4444", "red": "#f00"}``.
    """
    flat: dict[str, Any] = {}
    for name, values in (colors or {}).items():
        if isinstance(values, Mapping):
            for shade, value in flatten_palette(values).items():
                key = name if shade == "DEFAULT" else f"{name}-{shade}"
                flat[key] = value
        else:
            flat[name] = values
    return flat


@dataclass(frozen=True)
class Theme:
    """Theme values keyed by category (``colors``, ``screens``, ``opacity``...)."""

    categories: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {k: MappingProxyType(dict(v)) for k, v in self.categories.items()}
        object.__setattr__(self, "categories", MappingProxyType(frozen))

    def get(self, category: str) -> Mapping[str, Any]:
        """Return the table for *category*, following fallbacks; empty if unknown."""
        seen: set[str] = set()
        while category not in self.categories:
            if category in seen or category not in _FALLBACKS:
                return MappingProxyType({})
            seen.add(category)
            category = _FALLBACKS[category]
        return self.categories[category]

    def colors(self, category: str = "colors") -> dict[str, Any]:
        """Return the flattened colour palette for *category*."""
        return flatten_palette(self.get(category))

    @property
    def screens(self) -> Mapping[str, Any]:
        return self.get("screens")

    @property
    def opacity(self) -> Mapping[str, Any]:
        return self.get("opacity")

    def merged(
        self,
        overrides: Mapping[str, Mapping[str, Any]] | None = None,
        extend: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> "Theme":
        """Return a new theme with *overrides* replacing and *extend* merging categories."""
        categories = {k: dict(v) for k, v in self.categories.items()}
        for key, table in (overrides or {}).items():
            categories[key] = dict(table)
        for key, table in (extend or {}).items():
            base = dict(self.get(key)) if key not in categories else categories[key]
            base.update(table)
            categories[key] = base
        return Theme(categories=categories)


def _shades(**scale: str) -> dict[str, str]:
    return {k.lstrip("_"): v for k, v in scale.items()}


_DEFAULT_COLORS: dict[str, Any] = {
    "transparent": "transparent",
    "current": "currentColor",
    "black": "#000",
    "white": "#fff",
    "gray": _shades(
        _50="#f9fafb", _100="#f3f4f6", _200="#e5e7eb", _300="#d1d5db", _400="#9ca3af",
        _500="#6b7280", _600="#4b5563", _700="#374151", _800="#1f2937", _900="#111827",
    ),
    "red": _shades(
        _50="#fef2f2", _100="#fee2e2", _200="#fecaca", _300="#fca5a5", _400="#f87171",
        _500="#ef4444", _600="#dc2626", _700="#b91c1c", _800="#991b1b", _900="#7f1d1d",
    ),
    "green": _shades(
        _50="#f0fdf4", _100="#dcfce7", _200="#bbf7d0", _300="#86efac", _400="#4ade80",
        _500="#22c55e", _600="#16a34a", _700="#15803d", _800="#166534", _900="#14532d",
    ),
    "blue": _shades(
        _50="#eff6ff", _100="#dbeafe", _200="#bfdbfe", _300="#93c5fd", _400="#60a5fa",
        _500="#3b82f6", _600="#2563eb", _700="#1d4ed8", _800="#1e40af", _900="#1e3a8a",
    ),
}

_DEFAULT_SPACING: dict[str, str] = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "32": "8rem",
    "48": "12rem",
    "64": "16rem",
    "96": "24rem",
}

_DEFAULT_OPACITY: dict[str, str] = {
    "0": "0",
    "5": "0.05",
    "10": "0.1",
    "20": "0.2",
    "25": "0.25",
    "30": "0.3",
    "40": "0.4",
    "50": "0.5",
    "60": "0.6",
    "70": "0.7",
    "75": "0.75",
    "80": "0.8",
    "90": "0.9",
    "95": "0.95",
    "100": "1",
}


def default_theme() -> Theme:
    """Build the theme used when no configuration overrides it."""
    sizing = {**_DEFAULT_SPACING, "auto": "auto", "full": "100%", "screen": "100vw"}
    return Theme(
        categories={
            "colors": _DEFAULT_COLORS,
            "screens": {
                "sm": "640px",
                "md": "768px",
                "lg": "1024px",
                "xl": "1280px",
                "2xl": "1536px",
            },
            "opacity": _DEFAULT_OPACITY,
            "spacing": _DEFAULT_SPACING,
            "margin": {**_DEFAULT_SPACING, "auto": "auto"},
            "width": sizing,
            "height": {**sizing, "screen": "100vh"},
            "font_size": {
                "xs": ("0.75rem", "1rem"),
                "sm": ("0.875rem", "1.25rem"),
                "base": ("1rem", "1.5rem"),
                "lg": ("1.125rem", "1.75rem"),
                "xl": ("1.25rem", "1.75rem"),
                "2xl": ("1.5rem", "2rem"),
            },
            "font_family": {
                "sans": "ui-sans-serif, system-ui, sans-serif",
                "serif": "ui-serif, Georgia, serif",
                "mono": "ui-monospace, Menlo, monospace",
            },
            "background_image": {
                "none": "none",
                "gradient-to-r": "linear-gradient(to right, var(--tw-gradient-stops))",
                "gradient-to-b": "linear-gradient(to bottom, var(--tw-gradient-stops))",
            },
            "background_size": {"auto": "auto", "cover": "cover", "contain": "contain"},
            "background_position": {
                "bottom": "bottom",
                "center": "center",
                "left": "left",
                "right": "right",
                "top": "top",
            },
            "stroke_width": {"0": "0", "1": "1", "2": "2"},
            "border_width": {"DEFAULT": "1px", "0": "0px", "2": "2px", "4": "4px", "8": "8px"},
            "z_index": {"auto": "auto", "0": "0", "10": "10", "20": "20", "50": "50"},
        }
    )
