"""Note file resolution and lookup.

Two concerns live here:

- **Target resolution**: which markdown file a new note is appended to,
  following the repository-specific setting and the file rolling policy.
- **File lookup**: case-insensitive shell-glob matching of note files under a
  base directory, returned in ascending path order.

The working directory is passed in explicitly (``cwd``) rather than read from
the process so callers and tests do not need to ``chdir``.
"""

from __future__ import annotations

import fnmatch
import os
import re
from datetime import datetime
from pathlib import Path

from loguru import logger

from noted.core.exceptions import NoteNotFoundError, PatternError

from .config import NotesConfig
from .rolling import NOTES_FILE_NAME, note_file_name

_MAGIC = re.compile(r"[*?\[]")
_RECURSIVE = "**"


# -- target resolution ---------------------------------------------------------


def discover_repository(start: str | Path) -> Path | None:
    """Return the root of the git repository enclosing ``start``, or None.

    A directory is a repository root when it holds a ``.git`` directory or
    gitfile (worktrees and submodules use the latter).
    """
    current = Path(start).absolute()
    for directory in (current, *current.parents):
        if (directory / ".git").exists():
            return directory
    return None


def target(config: NotesConfig, cwd: str | Path | None = None, now: datetime | None = None) -> Path:
    """Return the note file a new note is appended to.

    In repository-specific mode inside a git repository this is
    ``<repo_root>/notes.md`` and the rolling policy is ignored. Outside a
    repository it falls back to the rolling file in ``note_directory``.
    """
    if config.use_repository_specific:
        start = Path(cwd) if cwd is not None else Path.cwd()
        logger.debug(f"Configured repository specific note file. Searching for repository from: {start}")
        repo_root = discover_repository(start)
        if repo_root is not None:
            logger.debug(f"Repository found at {repo_root}. Using repository specific note file.")
            return Path(os.path.normpath(repo_root / NOTES_FILE_NAME))
        logger.info("Repository not found.")

    return Path(config.note_directory) / note_file_name(config.file_rolling, now)


def custom_target(
    filename: str,
    config: NotesConfig,
    cwd: str | Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Return ``note_directory/<filename>.md``; an empty name means the current target.

    ``.md`` is appended unless the name already ends with it, so ``test.ini``
    becomes ``test.ini.md``. Repository-specific mode does not apply here.
    """
    if not filename:
        return target(config, cwd=cwd, now=now)
    if not filename.endswith(".md"):
        filename = f"{filename}.md"
    return Path(config.note_directory) / filename


# -- file lookup ---------------------------------------------------------------


def _validate_pattern(pattern: str) -> None:
    """Reject bracket expressions that are never closed."""
    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise PatternError(f"Invalid pattern '{pattern}': unclosed character class")
            i = j
        i += 1


def _children(directory: str) -> list[os.DirEntry]:
    try:
        with os.scandir(directory or ".") as entries:
            return list(entries)
    except OSError:
        # not a directory, or unreadable: no matches below it
        return []


def _descendants(directory: str, dirs_only: bool) -> list[str]:
    """Every entry below ``directory``; symlinked directories are not descended."""
    found = []
    for entry in _children(directory):
        path = os.path.join(directory, entry.name)
        if not dirs_only or entry.is_dir():
            found.append(path)
        if entry.is_dir(follow_symlinks=False):
            found.extend(_descendants(path, dirs_only))
    return found


def _expand(root: str, parts: tuple[str, ...]) -> list[str]:
    current = [root]
    last = len(parts) - 1
    for index, part in enumerate(parts):
        matched: list[str] = []
        if part == _RECURSIVE:
            for directory in current:
                if index < last:
                    # zero or more directories
                    matched.append(directory)
                    matched.extend(_descendants(directory, dirs_only=True))
                else:
                    matched.extend(_descendants(directory, dirs_only=False))
        elif _MAGIC.search(part):
            regex = re.compile(fnmatch.translate(part), re.IGNORECASE)
            for directory in current:
                for entry in _children(directory):
                    if not regex.match(entry.name):
                        continue
                    if index < last and not entry.is_dir():
                        continue
                    matched.append(os.path.join(directory, entry.name))
        elif part in (os.curdir, os.pardir):
            matched = [os.path.join(directory, part) for directory in current]
        else:
            lowered = part.lower()
            for directory in current:
                hits = [
                    os.path.join(directory, entry.name)
                    for entry in _children(directory)
                    if entry.name.lower() == lowered
                ]
                candidate = os.path.join(directory, part)
                if not hits and os.path.lexists(candidate):
                    # directory is searchable but not listable
                    hits.append(candidate)
                matched.extend(hits)
        current = matched
        if not current:
            break
    return current


def find(pattern: str, base_dir: str | Path) -> list[Path]:
    """Find files matching the glob ``pattern`` below ``base_dir``.

    Every segment, literal or wildcard, is matched case-insensitively, so
    ``a.md`` finds both ``a.md`` and ``A.MD``. ``*``, ``?`` and ``[...]``
    stay within one path segment; a segment that is exactly ``**`` matches
    zero or more directories, or everything below when it is the last
    segment. Results are sorted by their full path string.

    Raises:
        PatternError: The pattern is empty or malformed.
        NoteNotFoundError: The pattern is valid but matched nothing.
    """
    if not pattern:
        logger.error("Pattern is empty")
        raise PatternError("Pattern is empty")
    _validate_pattern(pattern)

    full_pattern = Path(base_dir) / pattern
    logger.debug(f"Search for {full_pattern}.")
    parts = full_pattern.parts
    if full_pattern.anchor:
        root, parts = parts[0], parts[1:]
    else:
        root = ""

    matches = sorted(set(_expand(root, parts)))
    logger.debug(f"Found {len(matches)} files that match pattern {full_pattern}: {matches}")

    if not matches:
        logger.error("Result is empty.")
        raise NoteNotFoundError(f"No file found matching '{pattern}' in {base_dir}")
    return [Path(match) for match in matches]


def find_first(pattern: str, base_dir: str | Path) -> Path:
    """Return the first (lowest sorted) file matching ``pattern``; see ``find``."""
    return find(pattern, base_dir)[0]
