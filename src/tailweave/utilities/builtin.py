"""Built-in utilities: colours with alpha composition, opacity companions,
sizing, spacing, typography and backgrounds."""

from __future__ import annotations

from typing import Any

from tailweave.model.config import GenerationConfig
from tailweave.model.value import ResolvedValue
from tailweave.utilities.registry import Declarations, UtilityRegistry
from tailweave.values.alpha import compose_alpha
from tailweave.values.color import to_color_value, with_alpha_value

__all__ = ["KNOWN_PLUGINS", "register_builtin_utilities"]

_DIVIDE_SELECTOR = "& > :not([hidden]) ~ :not([hidden])"

# Every plugin name the built-ins consult; used to flag typos in core_plugins.
KNOWN_PLUGINS = frozenset({
    "display", "accessibility",
    "background_color", "text_color", "border_color", "fill", "stroke",
    "caret_color", "accent_color", "placeholder_color", "divide_color",
    "gradient_color_stops",
    "background_opacity", "text_opacity", "border_opacity", "opacity",
    "placeholder_opacity", "divide_opacity",
    "width", "height", "margin", "padding", "font_size", "font_family",
    "background_image", "background_size", "background_position",
    "stroke_width", "border_width", "z_index",
})


def _color(
    config: GenerationConfig,
    property: str,
    variable: str | None = None,
    opacity_plugin: str | None = None,
):
    active = variable is not None and opacity_plugin is not None and config.plugin_enabled(opacity_plugin)

    def render(value: ResolvedValue) -> dict[str, str] | None:
        color = value.color if value.has_alpha else value.value
        return compose_alpha(color, value.alpha, property, variable or "", active)

    return render


def _nested(selector: str, render):
    def wrapped(value: ResolvedValue) -> Declarations | None:
        declarations = render(value)
        return None if declarations is None else {selector: declarations}

    return wrapped


def _props(*properties: str):
    def render(value: ResolvedValue) -> dict[str, str]:
        return {prop: str(value.value) for prop in properties}

    return render


def _font_size(value: ResolvedValue) -> dict[str, str]:
    size: Any = value.value
    if isinstance(size, (list, tuple)):
        size, line_height = size[0], size[1]
        return {"font-size": str(size), "line-height": str(line_height)}
    return {"font-size": str(size)}


def _register_colors(registry: UtilityRegistry, config: GenerationConfig) -> None:
    theme = config.theme
    opacity = theme.opacity
    color_utilities = [
        ("bg", "background_color", "background-color", "--tw-bg-opacity", "background_opacity"),
        ("text", "text_color", "color", "--tw-text-opacity", "text_opacity"),
        ("border", "border_color", "border-color", "--tw-border-opacity", "border_opacity"),
        ("fill", "fill", "fill", None, None),
        ("stroke", "stroke", "stroke", None, None),
        ("caret", "caret_color", "caret-color", None, None),
        ("accent", "accent_color", "accent-color", None, None),
    ]
    for name, category, prop, variable, opacity_plugin in color_utilities:
        if not config.plugin_enabled(category):
            continue
        registry.match_utilities(
            {name: _color(config, prop, variable, opacity_plugin)},
            values=theme.colors(category),
            kinds=("color", "any") if variable is None else ("color",),
            plugin=category,
            opacity=opacity,
        )

    if config.plugin_enabled("placeholder_color"):
        registry.match_utilities(
            {
                "placeholder": _nested(
                    "&::placeholder",
                    _color(config, "color", "--tw-placeholder-opacity", "placeholder_opacity"),
                )
            },
            values=theme.colors("placeholder_color"),
            kinds=("color", "any"),
            plugin="placeholder_color",
            opacity=opacity,
        )
    if config.plugin_enabled("divide_color"):
        registry.match_utilities(
            {
                "divide": _nested(
                    _DIVIDE_SELECTOR,
                    _color(config, "border-color", "--tw-divide-opacity", "divide_opacity"),
                )
            },
            values=theme.colors("divide_color"),
            kinds=("color",),
            plugin="divide_color",
            opacity=opacity,
        )

    if config.plugin_enabled("gradient_color_stops"):
        stops = theme.colors("gradient_color_stops")
        for name, render in (
            ("from", _gradient_from),
            ("via", _gradient_via),
            ("to", _gradient_to),
        ):
            registry.match_utilities(
                {name: render},
                values=stops,
                kinds=("color", "any"),
                plugin="gradient_color_stops",
                opacity=opacity,
            )


def _transparent_to(value: ResolvedValue) -> str:
    color = value.color if value.has_alpha else value.value
    return with_alpha_value(color, "0", "rgb(255 255 255 / 0)") or "rgb(255 255 255 / 0)"


def _stop(value: ResolvedValue) -> str:
    return str(to_color_value(value.value))


def _gradient_from(value: ResolvedValue) -> dict[str, str]:
    return {
        "--tw-gradient-from": _stop(value),
        "--tw-gradient-stops": f"var(--tw-gradient-from), var(--tw-gradient-to, {_transparent_to(value)})",
    }


def _gradient_via(value: ResolvedValue) -> dict[str, str]:
    return {
        "--tw-gradient-stops": (
            f"var(--tw-gradient-from), {_stop(value)}, var(--tw-gradient-to, {_transparent_to(value)})"
        ),
    }


def _gradient_to(value: ResolvedValue) -> dict[str, str]:
    return {"--tw-gradient-to": _stop(value)}


def _register_opacity(registry: UtilityRegistry, config: GenerationConfig) -> None:
    theme = config.theme
    companions = [
        ("bg-opacity", "background_opacity", ("--tw-bg-opacity",)),
        ("text-opacity", "text_opacity", ("--tw-text-opacity",)),
        ("border-opacity", "border_opacity", ("--tw-border-opacity",)),
        ("opacity", "opacity", ("opacity",)),
    ]
    for name, plugin, properties in companions:
        if not config.plugin_enabled(plugin):
            continue
        registry.match_utilities(
            {name: _props(*properties)},
            values=theme.get(plugin),
            kinds=("number", "percentage"),
            plugin=plugin,
        )
    if config.plugin_enabled("placeholder_opacity"):
        registry.match_utilities(
            {"placeholder-opacity": _nested("&::placeholder", _props("--tw-placeholder-opacity"))},
            values=theme.get("placeholder_opacity"),
            kinds=("number", "percentage"),
            plugin="placeholder_opacity",
        )
    if config.plugin_enabled("divide_opacity"):
        registry.match_utilities(
            {"divide-opacity": _nested(_DIVIDE_SELECTOR, _props("--tw-divide-opacity"))},
            values=theme.get("divide_opacity"),
            kinds=("number", "percentage"),
            plugin="divide_opacity",
        )


def _register_values(registry: UtilityRegistry, config: GenerationConfig) -> None:
    theme = config.theme
    length = ("length", "percentage")
    value_utilities = [
        ("width", {"w": _props("width")}, length),
        ("height", {"h": _props("height")}, length),
        (
            "margin",
            {
                "m": _props("margin"),
                "mx": _props("margin-left", "margin-right"),
                "my": _props("margin-top", "margin-bottom"),
                "mt": _props("margin-top"),
                "mr": _props("margin-right"),
                "mb": _props("margin-bottom"),
                "ml": _props("margin-left"),
            },
            length,
        ),
        (
            "padding",
            {
                "p": _props("padding"),
                "px": _props("padding-left", "padding-right"),
                "py": _props("padding-top", "padding-bottom"),
                "pt": _props("padding-top"),
                "pr": _props("padding-right"),
                "pb": _props("padding-bottom"),
                "pl": _props("padding-left"),
            },
            length,
        ),
        ("font_size", {"text": _font_size}, ("absolute-size", "relative-size", "length", "percentage")),
        ("font_family", {"font": _props("font-family")}, ("lookup", "generic-name", "family-name")),
        ("background_image", {"bg": _props("background-image")}, ("lookup", "image", "url")),
        ("background_size", {"bg": _props("background-size")}, ("lookup", "length", "percentage")),
        ("background_position", {"bg": _props("background-position")}, ("lookup", "position")),
        ("stroke_width", {"stroke": _props("stroke-width")}, ("length", "number", "percentage")),
        ("border_width", {"border": _props("border-width")}, ("line-width", "length")),
        ("z_index", {"z": _props("z-index")}, ("number",)),
    ]
    for plugin, utilities, kinds in value_utilities:
        if not config.plugin_enabled(plugin):
            continue
        registry.match_utilities(utilities, values=theme.get(plugin), kinds=kinds, plugin=plugin)


def _register_static(registry: UtilityRegistry, config: GenerationConfig) -> None:
    if config.plugin_enabled("display"):
        registry.add_utilities(
            {
                ".block": {"display": "block"},
                ".inline-block": {"display": "inline-block"},
                ".flex": {"display": "flex"},
                ".grid": {"display": "grid"},
                ".hidden": {"display": "none"},
            },
            plugin="display",
        )
    if config.plugin_enabled("accessibility"):
        registry.add_utilities(
            {
                ".sr-only": {
                    "position": "absolute",
                    "width": "1px",
                    "height": "1px",
                    "padding": "0",
                    "margin": "-1px",
                    "overflow": "hidden",
                    "clip": "rect(0, 0, 0, 0)",
                    "white-space": "nowrap",
                    "border-width": "0",
                },
            },
            plugin="accessibility",
        )


def register_builtin_utilities(
    registry: UtilityRegistry, config: GenerationConfig
) -> UtilityRegistry:
    """Register the built-in utilities enabled by *config*."""
    _register_static(registry, config)
    _register_colors(registry, config)
    _register_opacity(registry, config)
    _register_values(registry, config)
    return registry

