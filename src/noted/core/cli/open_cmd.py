"""noted open — open the current or a matching note file."""

from __future__ import annotations

import click

from .common import verbosity_option


@click.command("open")
@click.argument("filename", required=False)
@verbosity_option
def open_(filename: str | None) -> None:
    """Opens note file in default editor.

    Open the current note file in the default editor. Depending on the
    configuration the current note file may also be repository specific.
    If FILENAME is provided, a note file matching the pattern is searched
    in the configured note directory.
    """
    from noted.core.cli.common import fail, load_config, open_file
    from noted.core.exceptions import NotedError
    from noted.notes import resolve_open_target

    try:
        _, notes_config = load_config()
        path = resolve_open_target(filename, notes_config)
    except NotedError as e:
        fail(e)

    open_file(path)
