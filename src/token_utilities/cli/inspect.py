"""CLI command: token-utilities inspect -- look into the generated universe."""

from __future__ import annotations

import sys

import click

from token_utilities.cli.common import config_option, load_or_exit
from token_utilities.engine import UtilityEngine


@click.command()
@config_option
@click.argument("classes", nargs=-1)
def inspect(config_path: str, classes: tuple[str, ...]) -> None:
    """Summarise the utility universe, or print the CSS of CLASSES.

    Exits with code 1 if any requested class is not in the universe.
    """
    config, project_dir = load_or_exit(config_path)
    engine = UtilityEngine(config, cwd=project_dir)
    universe = engine.universe()

    if not classes:
        variants = sum(1 for key in universe.lookup if ":" in key)
        click.echo(f"Utilities: {len(universe)}")
        click.echo(f"  base:    {len(universe) - variants}")
        click.echo(f"  variant: {variants}")
        return

    missing = 0
    for name in classes:
        css = universe.get(name)
        if css is None:
            click.echo(f"/* {name}: not generated */")
            missing += 1
        else:
            click.echo(css)
    if missing:
        sys.exit(1)
