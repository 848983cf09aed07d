"""noted NOTE [TAG...] — append a note to the current note file."""

from __future__ import annotations

import click

from .common import verbosity_option


@click.command()
@click.argument("note")
@click.argument("tags", nargs=-1)
@click.option("-o", "open_after_write", is_flag=True, help="Open note file in default editor after writing")
@verbosity_option
def note(note: str, tags: tuple[str, ...], open_after_write: bool) -> None:
    """Take a note (default command)."""
    from noted.core.cli.common import fail, load_config, open_file
    from noted.core.exceptions import NotedError
    from noted.notes import Note, WriteTarget, render_note, resolve_write_target, write_note

    try:
        _, notes_config = load_config()
        formatted = render_note(Note(content=note, tags=list(tags)), notes_config.template)
        path = write_note(resolve_write_target(WriteTarget.note(), notes_config), formatted)
    except NotedError as e:
        fail(e)

    if open_after_write:
        open_file(path)
