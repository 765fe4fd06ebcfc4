"""content-loader CLI entry point: Click group with subcommands."""

import logging

import click

from content_loader import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=__version__, prog_name="content-loader")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """content-loader - inject manifest content scripts into open documents."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from content_loader.cli.plan import plan  # noqa: E402
from content_loader.cli.validate import validate  # noqa: E402

cli.add_command(plan)
cli.add_command(validate)
