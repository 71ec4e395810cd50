"""Tailweave model layer -- public type re-exports."""

from tailweave.model.config import GenerationConfig, config_from_dict, load_config
from tailweave.model.diagnostic import Diagnostic, Severity
from tailweave.model.theme import Theme, default_theme, flatten_palette
from tailweave.model.value import ResolvedValue

__all__ = [
    # config
    "GenerationConfig",
    "config_from_dict",
    "load_config",
    # theme
    "Theme",
    "default_theme",
    "flatten_palette",
    # diagnostic
    "Severity",
    "Diagnostic",
    # value
    "ResolvedValue",
]
