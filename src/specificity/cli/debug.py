"""CLI commands: specificity debug / annotate -- emit debug fields."""

from __future__ import annotations

from pathlib import Path

import click

from specificity.debug import annotate_stylesheet, debug_fields


@click.command()
@click.argument("selector")
def debug(selector: str) -> None:
    """Print the specificity and specificity-value fields for SELECTOR."""
    for name, value in debug_fields(selector).items():
        click.echo(f"{name}: {value}")


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def annotate(stylesheet: str) -> None:
    """Print STYLESHEET with debug fields appended to every rule.

    For inspecting a stylesheet only; the output is not production CSS.
    """
    source = Path(stylesheet).read_text(encoding="utf-8")
    click.echo(annotate_stylesheet(source), nl=False)
