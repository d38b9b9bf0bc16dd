"""CLI command: token-utilities scan -- show the classes found in files."""

from __future__ import annotations

from pathlib import Path

import click

from token_utilities.extract import ClassExtractor


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--matcher", "-m", multiple=True, help="Extra attribute or function name")
def scan(files: tuple[str, ...], matcher: tuple[str, ...]) -> None:
    """Print the utility-class candidates extracted from FILES."""
    extractor = ClassExtractor(matcher)
    for file in files:
        text = Path(file).read_text(encoding="utf-8", errors="replace")
        classes = sorted(extractor.extract(text))
        click.echo(f"{file}: {len(classes)} class(es)")
        for name in classes:
            click.echo(f"  {name}")
