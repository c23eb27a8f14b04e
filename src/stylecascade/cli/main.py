"""stylecascade CLI entry point: Click group with subcommands."""

import logging

import click

from stylecascade import __version__
from stylecascade.config import CascadeConfig


@click.group()
@click.version_option(version=__version__, prog_name="stylecascade")
@click.option(
    "--log-level",
    default=CascadeConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """stylecascade - resolve CSS rules against a document tree."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = CascadeConfig(log_level=log_level.upper())


# Import and register subcommands
from stylecascade.cli.demo import demo  # noqa: E402
from stylecascade.cli.parse import parse  # noqa: E402

cli.add_command(demo)
cli.add_command(parse)
