"""Operations the CLI commands are built from."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from noted.core.exceptions import FileIOError
from noted.core.utils.file_io import safe_append

from . import files
from .config import NotesConfig, NoteTemplate
from .formatting import format_note, format_table
from .models import MatchRecord, Note, SearchSpec, WriteTarget
from .search import search


def resolve_write_target(kind: WriteTarget, config: NotesConfig, cwd: str | Path | None = None) -> Path:
    """Return the file a note of ``kind`` is written to."""
    if kind.is_named:
        return files.custom_target(kind.name, config, cwd=cwd)
    return files.target(config, cwd=cwd)


def resolve_open_target(pattern: str | None, config: NotesConfig, cwd: str | Path | None = None) -> Path:
    """Return the first note file matching ``pattern``, or the current target without one."""
    if pattern is not None:
        return files.find_first(pattern, config.note_directory)
    return files.target(config, cwd=cwd)


def run_search(spec: SearchSpec, config: NotesConfig) -> list[MatchRecord]:
    return search(spec, config)


def render_note(note: Note, template: NoteTemplate) -> str:
    return format_note(note, template)


def render_table(records: list[MatchRecord]) -> list[str]:
    return format_table(records)


def write_note(path: Path, formatted: str) -> Path:
    """Append an already formatted note to ``path``."""
    try:
        safe_append(str(path), formatted)
    except OSError as e:
        logger.error(f"Could not create or append to note file at {path}: {e}")
        raise FileIOError(f"Could not write note file {path}: {e}", path=str(path)) from e
    logger.debug(f"Appending to note file: {path}")
    return path
