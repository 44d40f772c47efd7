"""Specificity CLI entry point: Click group with subcommands."""

import logging

import click

from specificity import __version__


@click.group()
@click.version_option(version=__version__, prog_name="specificity")
@click.option("--verbose", "-v", is_flag=True, help="Log tokenization and selection details")
def cli(verbose: bool) -> None:
    """Specificity - compute CSS selector specificity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from specificity.cli.compute import compute  # noqa: E402
from specificity.cli.debug import annotate, debug  # noqa: E402

cli.add_command(compute)
cli.add_command(debug)
cli.add_command(annotate)
