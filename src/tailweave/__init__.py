"""Tailweave: utility class names in, CSS rules out."""
from __future__ import annotations

from tailweave.errors import (
    ConfigError,
    CssParseError,
    ParseError,
    SelectorParseError,
    UnknownVariantError,
)
from tailweave.generator import Generator
from tailweave.model import GenerationConfig, Theme, default_theme, load_config
from tailweave.values import compose_alpha, resolve_modifier

__version__ = "0.1.0"

__all__ = [
    "Generator",
    "GenerationConfig",
    "Theme",
    "default_theme",
    "load_config",
    "resolve_modifier",
    "compose_alpha",
    "ParseError",
    "SelectorParseError",
    "CssParseError",
    "ConfigError",
    "UnknownVariantError",
]
