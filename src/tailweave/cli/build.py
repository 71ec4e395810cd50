"""CLI command: tailweave build -- generate CSS for candidate class names."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from tailweave.cli._config import load_or_exit
from tailweave.generator import Generator

logger = logging.getLogger(__name__)


@click.command()
@click.argument("candidates", nargs=-1)
@click.option("--config", "config_path", type=click.Path(exists=True), default=None,
              help="JSON configuration file.")
@click.option("--output", "output_path", type=click.Path(), default=None,
              help="Write CSS here instead of stdout.")
def build(candidates: tuple[str, ...], config_path: str | None, output_path: str | None) -> None:
    """Generate CSS for CANDIDATES."""
    config = load_or_exit(config_path)
    if not candidates:
        click.echo("No candidates given.", err=True)
        sys.exit(1)

    root = Generator(config).generate(candidates)
    css = root.to_css()
    logger.info(
        "Generated %d rule(s) from %d candidate(s)", len(root.walk_rules()), len(candidates)
    )

    if output_path:
        Path(output_path).write_text(css + "\n", encoding="utf-8")
        click.echo(f"Wrote {output_path}")
    else:
        click.echo(css)
