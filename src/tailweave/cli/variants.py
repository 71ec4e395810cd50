"""CLI command: tailweave variants -- list registered variant names."""

from __future__ import annotations

import click

from tailweave.cli._config import load_or_exit
from tailweave.variants import VariantRegistry, register_builtin_variants


@click.command()
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
def variants(config_path: str | None) -> None:
    """Print every registered variant, one per line, in registration order."""
    config = load_or_exit(config_path)
    registry = register_builtin_variants(VariantRegistry(), config)
    for name in registry.names():
        click.echo(name)
