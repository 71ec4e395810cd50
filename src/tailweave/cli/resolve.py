"""CLI command: tailweave resolve -- resolve one modifier against a theme category."""

from __future__ import annotations

import sys

import click

from tailweave.cli._config import load_or_exit
from tailweave.model import flatten_palette
from tailweave.values import SUPPORTED_KINDS, resolve_modifier


@click.command()
@click.argument("modifier")
@click.option("--kind", "kinds", multiple=True, required=True,
              type=click.Choice(sorted(SUPPORTED_KINDS)),
              help="Accepted value kind, in preference order (repeatable).")
@click.option("--theme-category", default=None, help="Theme category used for lookups.")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
def resolve(
    modifier: str,
    kinds: tuple[str, ...],
    theme_category: str | None,
    config_path: str | None,
) -> None:
    """Resolve MODIFIER and print ``value (kind)``; exits 1 when nothing matches."""
    config = load_or_exit(config_path)
    theme = config.theme
    table = flatten_palette(theme.get(theme_category)) if theme_category else {}

    result = resolve_modifier(modifier, table, list(kinds), opacity=theme.opacity)
    if result is None:
        click.echo(f"no match: {modifier}", err=True)
        sys.exit(1)
    click.echo(f"{result.value} ({result.kind})")
