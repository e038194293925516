"""Sapling CLI entry point: Click group with subcommands."""

import logging

import click

from sapling import __version__
from sapling.config import SaplingConfig


@click.group()
@click.version_option(version=__version__, prog_name="sapling")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Sapling - parse restricted HTML into a DOM tree and CSS into ranked rules."""
    config = SaplingConfig.from_env()
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from sapling.cli.css import css  # noqa: E402
from sapling.cli.tree import tree  # noqa: E402

cli.add_command(tree)
cli.add_command(css)
