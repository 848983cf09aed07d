"""noted search — regex search across note files."""

from __future__ import annotations

import click

from .common import verbosity_option


@click.command()
@click.option("-t", "--tag", "tags_only", is_flag=True, help="Search only for tags")
@click.argument("pattern")
@click.argument("file_filter", required=False)
@verbosity_option
def search(tags_only: bool, pattern: str, file_filter: str | None) -> None:
    """Search for a specific string in notes using a RegEx PATTERN.

    FILE_FILTER limits the search to note files matching the glob.
    """
    from noted.core.cli.common import fail, load_config
    from noted.core.exceptions import NotedError
    from noted.notes import SearchSpec, render_table, run_search

    try:
        _, notes_config = load_config()
        records = run_search(
            SearchSpec(pattern=pattern, tags_only=tags_only, file_filter=file_filter),
            notes_config,
        )
    except (NotedError, OSError) as e:
        fail(e)

    for line in render_table(records):
        click.echo(line)
