"""CLI command: token-utilities build -- inject used utilities into a stylesheet."""

from __future__ import annotations

from pathlib import Path

import click

from token_utilities.cli.common import config_option, load_or_exit
from token_utilities.engine import UtilityEngine
from token_utilities.events import ReferenceWritten


@click.command()
@config_option
@click.option(
    "--input",
    "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Stylesheet containing the @layer insertion point",
)
@click.option("--output", "-o", "output_path", default=None, help="Write here instead of stdout")
def build(config_path: str, input_path: str, output_path: str | None) -> None:
    """Run one build pass over a stylesheet.

    Replaces the contents of the ``@layer utilities-gen`` block with the
    utilities referenced by the content files.
    """
    config, project_dir = load_or_exit(config_path)
    engine = UtilityEngine(config, cwd=project_dir)
    engine.event_bus.subscribe(
        ReferenceWritten, lambda event: click.echo(f"Updated reference: {event.path}", err=True)
    )

    source = Path(input_path).read_text(encoding="utf-8")
    result = engine.build(source)

    if output_path:
        Path(output_path).write_text(result.css, encoding="utf-8")
    else:
        click.echo(result.css, nl=False)

    if result.skipped:
        click.echo("Skipped: designTokenSource and content are required", err=True)
        return
    if not result.inserted:
        click.echo(f"Warning: no @layer {config.layer} block in {input_path}", err=True)
    click.echo(
        f"{len(result.injected)} utilities injected "
        f"({result.files_scanned} files scanned, {result.files_read} read)",
        err=True,
    )
