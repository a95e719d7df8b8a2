"""selector-builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selector_builder import __version__
from selector_builder.config import SelectorConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selector-builder - build CSS selector strings from ordered fragments."""
    config = SelectorConfig.from_env()
    level = logging.DEBUG if verbose else config.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.order import order  # noqa: E402

cli.add_command(build)
cli.add_command(order)
