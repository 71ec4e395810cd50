"""Validation rules for generation configs.

Each rule is a function taking a GenerationConfig and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import Mapping

from tailweave.model.config import GenerationConfig
from tailweave.model.diagnostic import Diagnostic, Severity
from tailweave.utilities.builtin import KNOWN_PLUGINS
from tailweave.values.color import is_color
from tailweave.values.kinds import resolve_by_kind

_DARK_MODES = ("media", "class")
_SCREEN_KEYS = frozenset({"min", "max", "min-width", "max-width", "raw"})


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_separator(config: GenerationConfig) -> list[Diagnostic]:
    """The separator must be non-empty and free of whitespace and brackets."""
    sep = config.separator
    if not sep or any(ch.isspace() or ch in "[]" for ch in sep):
        return [
            Diagnostic(
                rule="check_separator",
                severity=Severity.ERROR,
                message=f"Separator {sep!r} cannot split candidates.",
                key="separator",
                fix="Use a short punctuation string such as ':' or '_'.",
            )
        ]
    return []


def check_prefix(config: GenerationConfig) -> list[Diagnostic]:
    """The prefix must not contain whitespace or the separator."""
    prefix = config.prefix
    if any(ch.isspace() for ch in prefix) or (prefix and config.separator in prefix):
        return [
            Diagnostic(
                rule="check_prefix",
                severity=Severity.ERROR,
                message=f"Prefix {prefix!r} contains whitespace or the separator.",
                key="prefix",
            )
        ]
    return []


def check_dark_mode(config: GenerationConfig) -> list[Diagnostic]:
    """dark_mode is 'media', 'class' or false."""
    mode = config.dark_mode
    if mode is False:
        return [
            Diagnostic(
                rule="check_dark_mode",
                severity=Severity.WARNING,
                message="dark_mode is false; it behaves like 'media'.",
                key="dark_mode",
                fix="Set dark_mode to 'media' explicitly.",
            )
        ]
    if mode not in _DARK_MODES:
        return [
            Diagnostic(
                rule="check_dark_mode",
                severity=Severity.ERROR,
                message=f"Unknown dark_mode {mode!r}.",
                key="dark_mode",
                fix="Use 'media' or 'class'.",
            )
        ]
    return []


def check_opacity_scale(config: GenerationConfig) -> list[Diagnostic]:
    """Opacity values must be numbers or percentages."""
    diagnostics: list[Diagnostic] = []
    for key, value in config.theme.opacity.items():
        text = str(value)
        if resolve_by_kind("number", text) is None and resolve_by_kind("percentage", text) is None:
            diagnostics.append(
                Diagnostic(
                    rule="check_opacity_scale",
                    severity=Severity.ERROR,
                    message=f"Opacity {key!r} has non-numeric value {value!r}.",
                    key=f"theme.opacity.{key}",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_screens(config: GenerationConfig) -> list[Diagnostic]:
    """Screen sizes should be lengths or media-feature mappings."""
    diagnostics: list[Diagnostic] = []
    for name, size in config.theme.screens.items():
        entries = size if isinstance(size, list) else [size]
        for entry in entries:
            if isinstance(entry, str):
                ok = resolve_by_kind("length", entry) is not None
            elif isinstance(entry, Mapping):
                ok = bool(entry) and set(entry) <= _SCREEN_KEYS
            else:
                ok = False
            if not ok:
                diagnostics.append(
                    Diagnostic(
                        rule="check_screens",
                        severity=Severity.WARNING,
                        message=f"Screen {name!r} has an unusable size {entry!r}.",
                        key=f"theme.screens.{name}",
                        fix="Use a length such as '640px' or {'min': ..., 'max': ...}.",
                    )
                )
    return diagnostics


def check_colors(config: GenerationConfig) -> list[Diagnostic]:
    """Colours that cannot be parsed cannot take an alpha suffix."""
    diagnostics: list[Diagnostic] = []
    for name, value in config.theme.colors().items():
        if callable(value) or (isinstance(value, str) and is_color(value)):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_colors",
                severity=Severity.INFO,
                message=f"Colour {name!r} ({value!r}) cannot be combined with an opacity.",
                key=f"theme.colors.{name}",
            )
        )
    return diagnostics


def check_core_plugins(config: GenerationConfig) -> list[Diagnostic]:
    """core_plugins should only name known plugins."""
    return [
        Diagnostic(
            rule="check_core_plugins",
            severity=Severity.WARNING,
            message=f"Unknown core plugin {name!r}.",
            key=f"core_plugins.{name}",
        )
        for name in config.core_plugins
        if name not in KNOWN_PLUGINS
    ]


ALL_RULES = [
    check_separator,
    check_prefix,
    check_dark_mode,
    check_opacity_scale,
    check_screens,
    check_colors,
    check_core_plugins,
]
