"""Shared setup logic for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click
from loguru import logger

from noted.core.utils.logging import level_for_verbosity, setup_logging

_VERBOSITY_KEY = "noted.verbosity"


def _configure_logging(ctx: click.Context, param: click.Parameter, value: int) -> None:
    # -d may be given to the group and to the subcommand; the highest count wins
    meta = ctx.find_root().meta
    verbosity = max(value or 0, meta.get(_VERBOSITY_KEY, 0))
    meta[_VERBOSITY_KEY] = verbosity
    setup_logging(level=level_for_verbosity(verbosity))


def verbosity_option(f):
    """Add the repeatable ``-d`` flag (WARNING, INFO, DEBUG, TRACE)."""
    return click.option(
        "-d",
        "verbosity",
        count=True,
        expose_value=False,
        is_eager=True,
        callback=_configure_logging,
        help="Set the level of verbosity",
    )(f)


def load_config():
    """Load the configuration, creating the config and template files on first use."""
    from noted.core.config import Config
    from noted.notes.config import ensure_template_file, load_notes_config

    config = Config()
    config.ensure_file()
    notes_config = load_notes_config(config)
    ensure_template_file(notes_config)
    return config, notes_config


def open_file(path: str | Path) -> None:
    """Open ``path`` in the default application."""
    logger.debug(f"Open file: {path}")
    click.launch(str(path))


def fail(error: Exception) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)
