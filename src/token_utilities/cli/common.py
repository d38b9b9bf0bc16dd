"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from token_utilities.config import CONFIG_FILE_NAME, UtilityConfig, load_config
from token_utilities.errors import ConfigError

config_option = click.option(
    "--config",
    "config_path",
    default=CONFIG_FILE_NAME,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="JSON config file",
)


def load_or_exit(config_path: str) -> tuple[UtilityConfig, Path]:
    """Load the config, or print the error and exit 1.

    Returns the config and the project directory (the config file's parent).
    """
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    if config.logs:
        logging.getLogger("token_utilities").setLevel(logging.INFO)
    return config, Path(config_path).resolve().parent
