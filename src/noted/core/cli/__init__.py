"""noted CLI — take a note, or create, open and search note files."""

import re

import click

from noted import __version__

from .common import verbosity_option

DEFAULT_COMMAND = "note"

ALIASES = {
    "c": "create",
    "new": "create",
    "n": "create",
    "o": "open",
    "edit": "open",
    "e": "open",
    "view": "open",
    "s": "search",
    "grep": "search",
    "find": "search",
    "f": "search",
}

_GROUP_FLAGS = {"-h", "--help", "-v", "--version"}
_VERBOSITY_FLAG = re.compile(r"^-d+$")


class NoteGroup(click.Group):
    """Command group that resolves aliases and treats bare text as a note.

    ``noted "some note" tag`` runs the ``note`` command, while
    ``noted search ...`` and its aliases run the matching subcommand.
    """

    def get_command(self, ctx: click.Context, cmd_name: str):
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        first = next((arg for arg in args if not _VERBOSITY_FLAG.match(arg)), None)
        if first is not None and first not in _GROUP_FLAGS and self.get_command(ctx, first) is None:
            args = [DEFAULT_COMMAND, *args]
        return super().parse_args(ctx, args)


@click.group(cls=NoteGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", package_name="noted")
@verbosity_option
def main() -> None:
    """Take notes using CLI."""


# Register subcommands (lazy imports inside each command keep startup fast)
from .config_cmd import config
from .create_cmd import create
from .note_cmd import note
from .open_cmd import open_
from .search_cmd import search

main.add_command(note)
main.add_command(create)
main.add_command(open_)
main.add_command(search)
main.add_command(config)
