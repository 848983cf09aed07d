"""Core data models for note files, notes and search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from noted.core.exceptions import ConfigurationError


class FileRolling(Enum):
    """How often a new note file is started."""

    DAILY = "daily"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    NEVER = "never"  # one fixed notes.md

    @classmethod
    def parse(cls, value: str | FileRolling) -> FileRolling:
        """Parse a config value case-insensitively (``"Month"`` -> ``MONTH``)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(f"unable to parse file rolling from '{value}'") from None


@dataclass
class Note:
    """A note and its tags. ``Note()`` is the empty note written by ``create``."""

    content: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SearchSpec:
    """What to search for.

    Attributes:
        pattern: Regular expression matched against each line.
        tags_only: Only match ``#<pattern>`` tags.
        file_filter: Glob limiting which note files are scanned.
            None scans every file in the note directory.
    """

    pattern: str
    tags_only: bool = False
    file_filter: str | None = None


@dataclass(frozen=True)
class MatchRecord:
    """One matching line: the file, its 1-based line number and the matched excerpt."""

    file_path: str
    line_number: int
    excerpt: str


@dataclass(frozen=True)
class WriteTarget:
    """Where a note is written: the current note file, or a named file."""

    name: str | None = None

    @classmethod
    def note(cls) -> WriteTarget:
        return cls()

    @classmethod
    def named(cls, name: str) -> WriteTarget:
        return cls(name=name)

    @property
    def is_named(self) -> bool:
        return self.name is not None
