"""File rolling: the note file name for the current period."""

from __future__ import annotations

from datetime import datetime

from loguru import logger

from .models import FileRolling

NOTES_FILE_NAME = "notes.md"

# %W numbers weeks from the first Monday of the year (00-53).
_DATE_FORMATS = {
    FileRolling.DAILY: "%Y-%m-%d",
    FileRolling.WEEK: "%Y-%W",
    FileRolling.MONTH: "%Y-%m",
    FileRolling.YEAR: "%Y",
}


def note_file_name(rolling: FileRolling, now: datetime | None = None) -> str:
    """Return the note file name for ``rolling`` at ``now`` (local time by default).

    >>> note_file_name(FileRolling.MONTH, datetime(2021, 4, 2))
    '2021-04.md'
    """
    logger.debug(f"Note file name based on file rolling: {rolling.name}")
    if rolling is FileRolling.NEVER:
        return NOTES_FILE_NAME
    now = now or datetime.now()
    return f"{now.strftime(_DATE_FORMATS[rolling])}.md"
