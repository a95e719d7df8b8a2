"""CLI command: selector-builder order -- show the required fragment order."""

from __future__ import annotations

import click

from selector_builder.model import FragmentKind


@click.command()
def order() -> None:
    """List fragment kinds in the order they must appear in a selector."""
    for kind in FragmentKind:
        occurs = "once" if kind.singular else "repeatable"
        click.echo(f"  {kind.rank}  {kind.value:<15} {kind.render('name'):<8} {occurs}")
