"""Typed configuration for the note engine.

These are immutable data containers built once per invocation from the
hierarchical ``noted.core.config.Config`` via ``load_notes_config``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from noted.core.config import DEFAULT_DATE_FORMAT, Config, initial_note_directory
from noted.core.exceptions import ConfigurationError
from noted.core.utils.file_io import read_optional, safe_write

from .models import FileRolling

DEFAULT_TEMPLATE = "%date_format%\n\n%note%\n\n%tags%"

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


@dataclass(frozen=True)
class NoteTemplate:
    """Markdown template for a single note entry.

    Attributes:
        template: Text with ``%date_format%``, ``%note%`` and ``%tags%`` placeholders.
        date_format: strftime format substituted for ``%date_format%``.
    """

    template: str = DEFAULT_TEMPLATE
    date_format: str = DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class NotesConfig:
    """Settings consumed by target resolution, file lookup and search.

    Attributes:
        note_directory: Directory holding the note files. Must exist.
        use_repository_specific: Write to ``<repo>/notes.md`` inside a git repository.
        file_rolling: How often a new note file is started.
        template: Template used to render notes.
        template_file: Where the template text is read from.
    """

    note_directory: Path = field(default_factory=lambda: Path(initial_note_directory()))
    use_repository_specific: bool = False
    file_rolling: FileRolling = FileRolling.DAILY
    template: NoteTemplate = field(default_factory=NoteTemplate)
    template_file: Path | None = None


def _parse_bool(value, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"invalid boolean for {key}: '{value}'")


def _load_template_text(template_file: Path) -> str:
    try:
        text = read_optional(str(template_file))
    except OSError as e:
        logger.error(f"Could not read template at {template_file}: {e}")
        return DEFAULT_TEMPLATE
    return DEFAULT_TEMPLATE if text is None else text


def load_notes_config(config: Config) -> NotesConfig:
    """Build a NotesConfig from raw configuration values."""
    template_file = config.get("template.file")
    template_path = Path(template_file).expanduser() if template_file else None
    template_text = _load_template_text(template_path) if template_path else DEFAULT_TEMPLATE

    return NotesConfig(
        note_directory=Path(str(config.get("notes.directory"))).expanduser(),
        use_repository_specific=_parse_bool(
            config.get("notes.use_repository_specific", False), "notes.use_repository_specific"
        ),
        file_rolling=FileRolling.parse(config.get("notes.file_rolling", FileRolling.DAILY.value)),
        template=NoteTemplate(
            template=template_text,
            date_format=config.get("template.date_format") or DEFAULT_DATE_FORMAT,
        ),
        template_file=template_path,
    )


def ensure_template_file(notes_config: NotesConfig) -> None:
    """Write the current template text to ``template_file`` if it does not exist."""
    path = notes_config.template_file
    if path is None or path.exists():
        return
    safe_write(str(path), notes_config.template.template)
    logger.debug(f"Note template written to {path}")
