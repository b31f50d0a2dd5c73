"""uncss CLI entry point: Click group with subcommands."""

import click

from uncss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="uncss")
def cli() -> None:
    """uncss - remove CSS rules that none of your pages use."""


# Import and register subcommands
from uncss.cli.run import run  # noqa: E402
from uncss.cli.report import report  # noqa: E402

cli.add_command(run)
cli.add_command(report)
