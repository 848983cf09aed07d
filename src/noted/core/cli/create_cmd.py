"""noted create — create a named note file and open it."""

from __future__ import annotations

import click

from .common import verbosity_option


@click.command()
@click.argument("filename")
@verbosity_option
def create(filename: str) -> None:
    """Create note file and open in default editor.

    A note file with the provided name is created in the configured note
    directory and opened in your default editor.
    """
    from noted.core.cli.common import fail, load_config, open_file
    from noted.core.exceptions import NotedError
    from noted.notes import Note, WriteTarget, render_note, resolve_write_target, write_note

    try:
        _, notes_config = load_config()
        formatted = render_note(Note(), notes_config.template)
        path = write_note(resolve_write_target(WriteTarget.named(filename), notes_config), formatted)
    except NotedError as e:
        fail(e)

    open_file(path)
