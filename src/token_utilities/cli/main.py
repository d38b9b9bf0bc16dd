"""token-utilities CLI entry point: Click group with subcommands."""

import logging

import click

from token_utilities import __version__


@click.group()
@click.version_option(version=__version__, prog_name="token-utilities")
@click.option("-v", "--verbose", is_flag=True, help="Log build progress")
def cli(verbose: bool) -> None:
    """token-utilities - utility CSS generated from your design tokens."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="[token-utilities] %(levelname)s %(message)s",
    )


# Import and register subcommands
from token_utilities.cli.build import build  # noqa: E402
from token_utilities.cli.check import check  # noqa: E402
from token_utilities.cli.inspect import inspect  # noqa: E402
from token_utilities.cli.scan import scan  # noqa: E402
from token_utilities.cli.watch import watch  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(inspect)
cli.add_command(scan)
cli.add_command(watch)


def main() -> None:
    cli()
