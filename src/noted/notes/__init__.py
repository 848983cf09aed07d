"""Note file resolution, lookup and search.

Provides the file rolling policy, target file resolution, glob-based note
file lookup, regex search with result windows, and note/table rendering.
"""

from .api import (
    render_note,
    render_table,
    resolve_open_target,
    resolve_write_target,
    run_search,
    write_note,
)
from .config import NotesConfig, NoteTemplate, load_notes_config
from .models import FileRolling, MatchRecord, Note, SearchSpec, WriteTarget

__all__ = [
    "FileRolling",
    "MatchRecord",
    "Note",
    "NoteTemplate",
    "NotesConfig",
    "SearchSpec",
    "WriteTarget",
    "load_notes_config",
    "render_note",
    "render_table",
    "resolve_open_target",
    "resolve_write_target",
    "run_search",
    "write_note",
]
