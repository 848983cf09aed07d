"""Rendering of notes and search results."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from loguru import logger

from .config import NoteTemplate
from .models import MatchRecord, Note

FILE_WIDTH = 30
LINE_WIDTH = 4
CONTENT_WIDTH = 45
ELLIPSIS = "..."

NOTE_SEPARATOR = "---"


def format_note(note: Note, template: NoteTemplate, now: datetime | None = None) -> str:
    """Render ``note`` into ``template`` followed by the ``---`` entry separator."""
    now = now or datetime.now()
    text = template.template.replace("%date_format%", now.strftime(template.date_format))
    if "%tags%" in template.template:
        tags = "#" + ";#".join(note.tags) if note.tags else ""
        text = text.replace("%tags%", tags)
    # content goes in last so placeholders typed into a note stay verbatim
    text = text.replace("%note%", note.content)
    formatted = f"{text.strip()}\n\n{NOTE_SEPARATOR}\n"
    logger.debug(f"Writing note: {formatted!r}")
    return formatted


def _row(file: str, line: str, content: str) -> str:
    return f"{file:<{FILE_WIDTH}} | {line:<{LINE_WIDTH}} | {content:<{CONTENT_WIDTH}}".rstrip()


def _crop_path(path: str) -> str:
    # keep the end of the path, it holds the file name
    if len(path) >= FILE_WIDTH:
        return ELLIPSIS + path[-(FILE_WIDTH - len(ELLIPSIS)) :]
    return path


def _crop_content(content: str) -> str:
    if len(content) >= CONTENT_WIDTH:
        return content[: CONTENT_WIDTH - len(ELLIPSIS)] + ELLIPSIS
    return content


def format_table(records: Iterable[MatchRecord]) -> list[str]:
    """Render search results as fixed-width table lines, header first."""
    records = list(records)
    logger.debug(f"Formatting {len(records)} occurrences to a table")
    table = [_row("File", "Line", "Content")]
    for record in records:
        table.append(_row(_crop_path(record.file_path), str(record.line_number), _crop_content(record.excerpt)))
    return table
