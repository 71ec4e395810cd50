"""CLI command: tailweave validate -- check a configuration file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailweave.cli._config import load_or_exit
from tailweave.model.diagnostic import Severity
from tailweave.validation import ValidationError, validate_or_raise
from tailweave.validation import validate as run_validate


@click.command()
@click.argument("config_file", type=click.Path(exists=True))
@click.option("--strict", is_flag=True, help="Treat warnings as failures.")
def validate(config_file: str, strict: bool) -> None:
    """Load and validate a JSON configuration file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    nothing blocks, or code 1 if there are errors (or warnings with --strict).
    """
    config = load_or_exit(config_file)
    diagnostics = run_validate(config)
    name = Path(config_file).name

    if not diagnostics:
        click.echo(f"OK: {name} is valid (0 diagnostics)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    counts = {severity: 0 for severity in Severity}
    for diag in diagnostics:
        counts[diag.severity] += 1
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )

    try:
        validate_or_raise(config, strict=strict)
    except ValidationError as exc:
        click.echo(f"Rejected: {', '.join(exc.keys)}", err=True)
        sys.exit(1)
    sys.exit(0)
