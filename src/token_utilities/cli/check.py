"""CLI command: token-utilities check -- validate the config and rule tables."""

from __future__ import annotations

import sys

import click

from token_utilities.cli.common import config_option, load_or_exit
from token_utilities.rules.loader import load_rules_file
from token_utilities.rules.model import Rules
from token_utilities.validation import Severity, validate_config


@click.command()
@config_option
def check(config_path: str) -> None:
    """Validate the configuration and rule extensions.

    Prints diagnostics and exits with code 1 if any of them is an error.
    """
    config, project_dir = load_or_exit(config_path)

    rules = config.extend
    if config.rules_file:
        rules = (load_rules_file(project_dir) or Rules()).merge(config.extend)

    diagnostics = validate_config(config, rules=rules, cwd=project_dir)
    if not diagnostics:
        click.echo("OK: configuration is valid (0 diagnostics)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")
    sys.exit(1 if errors else 0)
