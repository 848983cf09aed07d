"""noted config — open the configuration file."""

from __future__ import annotations

import click

from .common import verbosity_option


@click.command()
@verbosity_option
def config() -> None:
    """Open configuration in default editor."""
    from noted.core.cli.common import fail, load_config, open_file
    from noted.core.exceptions import NotedError

    try:
        cfg, _ = load_config()
    except NotedError as e:
        fail(e)

    open_file(cfg.config_file)
