"""CLI command: specificity compute -- print a selector's specificity."""

from __future__ import annotations

import click

from specificity.aggregator import specificities, specificity
from specificity.config import SpecificityConfig


@click.command()
@click.argument("selector")
@click.option("--value", "as_integer", is_flag=True, help="Print the integer encoding")
@click.option("--base", default=256, type=click.IntRange(min=2), show_default=True,
              help="Positional base for the integer encoding")
@click.option("--all", "show_all", is_flag=True, help="Show every selector in the list")
def compute(selector: str, as_integer: bool, base: int, show_all: bool) -> None:
    """Compute the specificity of SELECTOR.

    For a comma-separated list the most specific member is reported.
    """
    config = SpecificityConfig(base=base)

    if show_all:
        for member, triple in specificities(selector, config):
            result = triple.value(base) if as_integer else triple
            click.echo(f"{member}  {result}")
        return

    click.echo(str(specificity(selector, as_integer, config)))
