"""Regex search across note files.

A search is a linear scan: gather the candidate files with the file locator,
then match each line against a derived regex. In normal mode the regex carries
a context window of up to ``N`` characters on either side of the match, sized
so that the excerpt fits the result table's content column. The regex engine
therefore produces the excerpt directly; no separate cropping step is needed.
"""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

from noted.core.exceptions import FileIOError, InvalidInputError, PatternError

from .config import NotesConfig
from .files import find
from .formatting import CONTENT_WIDTH
from .models import MatchRecord, SearchSpec

ALL_FILES = "*"


def context_window(pattern: str, width: int = CONTENT_WIDTH) -> int:
    """Characters allowed on each side of a match so the excerpt fits ``width``."""
    return max(0, (width - len(pattern)) // 2)


def build_regex(spec: SearchSpec) -> re.Pattern:
    """Compile the effective regex for ``spec``.

    Tag mode matches ``#<pattern>``; normal mode wraps the pattern in the
    context window.

    Raises:
        PatternError: The pattern is not a valid regular expression.
    """
    if spec.tags_only:
        effective = f"#{spec.pattern}"
    else:
        window = context_window(spec.pattern)
        effective = f".{{0,{window}}}{spec.pattern}.{{0,{window}}}"
    logger.debug(f"Using the following RegEx: {effective!r}")
    try:
        return re.compile(effective)
    except re.error as e:
        raise PatternError(f"Invalid search pattern '{spec.pattern}': {e}") from e


def search_file(path: Path, regex: re.Pattern) -> list[MatchRecord]:
    """Return the first match of ``regex`` on each line of ``path``.

    Raises:
        FileIOError: The file could not be read or is not UTF-8 text. The
            underlying error is kept as ``__cause__``.
    """
    logger.debug(f"Try reading file: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        raise FileIOError(f"Could not read note file {path}: {e}", path=str(path)) from e
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    records = []
    for line_number, line in enumerate(lines, start=1):
        match = regex.search(line.rstrip("\r"))
        if match:
            records.append(MatchRecord(str(path), line_number, match.group(0)))
    return records


def search(spec: SearchSpec, config: NotesConfig) -> list[MatchRecord]:
    """Search the note directory for ``spec``.

    Files are scanned in sorted order, each from top to bottom, so records are
    ordered by file and then line. No hits is an empty list, not an error.

    Raises:
        InvalidInputError: ``spec.pattern`` is empty.
        PatternError: The file filter or the search pattern is malformed.
        NoteNotFoundError: The file filter matched no files.
        FileIOError: A candidate file could not be read; the search is aborted.
    """
    logger.info(f"Search string: '{spec.pattern}'")
    if not spec.pattern:
        logger.error("Search string is empty")
        raise InvalidInputError("Search string is empty")

    if spec.file_filter:
        logger.info(f"Limit files to: '{spec.file_filter}'")
    files = find(spec.file_filter or ALL_FILES, config.note_directory)
    regex = build_regex(spec)

    matches: list[MatchRecord] = []
    for path in files:
        if not path.is_file():
            continue
        matches.extend(search_file(path, regex))

    logger.debug(f"Found {len(matches)} occurrences")
    return matches
