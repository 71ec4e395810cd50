"""Generation configuration: separator, prefix, dark mode, theme, plugin toggles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from tailweave.errors import ConfigError
from tailweave.model.theme import Theme, default_theme

__all__ = ["GenerationConfig", "load_config", "config_from_dict"]

_KNOWN_KEYS = {"separator", "prefix", "dark_mode", "theme", "core_plugins"}


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable settings shared by every resolver, rewriter and variant.

    ``core_plugins`` maps plugin names to a boolean; plugins absent from the
    mapping are enabled.
    """

    separator: str = ":"
    prefix: str = ""
    dark_mode: str | bool = "media"
    theme: Theme = field(default_factory=default_theme)
    core_plugins: Mapping[str, bool] = field(default_factory=dict)

    def plugin_enabled(self, name: str) -> bool:
        return bool(self.core_plugins.get(name, True))


def config_from_dict(data: Mapping[str, Any]) -> GenerationConfig:
    """Overlay a parsed configuration mapping on the defaults."""
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration root must be an object")
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    theme_data = dict(data.get("theme") or {})
    extend = theme_data.pop("extend", None) or {}
    for key, table in list(theme_data.items()) + list(extend.items()):
        if not isinstance(table, Mapping):
            raise ConfigError(f"Theme category {key!r} must be an object")

    core_plugins = data.get("core_plugins") or {}
    if not isinstance(core_plugins, Mapping):
        raise ConfigError("core_plugins must map plugin names to booleans")

    return GenerationConfig(
        separator=str(data.get("separator", ":")),
        prefix=str(data.get("prefix", "")),
        dark_mode=data.get("dark_mode", "media"),
        theme=default_theme().merged(overrides=theme_data, extend=extend),
        core_plugins=dict(core_plugins),
    )


def load_config(path: str | Path) -> GenerationConfig:
    """Read a JSON configuration file and overlay it on the defaults."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON in {config_path} at line {exc.lineno}: {exc.msg}"
        ) from exc
    return config_from_dict(data)
