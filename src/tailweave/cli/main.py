"""Tailweave CLI entry point: Click group with subcommands."""

import logging

import click

from tailweave import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tailweave")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped candidates and other details.")
def cli(verbose: bool) -> None:
    """Tailweave - generate CSS from utility class names."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from tailweave.cli.build import build  # noqa: E402
from tailweave.cli.resolve import resolve  # noqa: E402
from tailweave.cli.validate import validate  # noqa: E402
from tailweave.cli.variants import variants  # noqa: E402

cli.add_command(build)
cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(variants)
