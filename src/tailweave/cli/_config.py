"""Shared config loading for CLI commands."""

from __future__ import annotations

import sys

import click

from tailweave.errors import ConfigError
from tailweave.model import GenerationConfig, load_config


def load_or_exit(path: str | None) -> GenerationConfig:
    """Load *path* (or the defaults); exits with code 2 on a config error."""
    if path is None:
        return GenerationConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(2)
