"""
File I/O utilities for note and config files.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding) as f:
        f.write(content)


def safe_append(filepath: str, content: str, encoding: str = "utf-8") -> None:
    """Append content to a file, creating it (and its parents) if missing."""
    safe_write(filepath, content, mode="a", encoding=encoding)


def read_optional(filepath: str, encoding: str = "utf-8") -> str | None:
    """Return the file's text, or None if it does not exist."""
    if not os.path.exists(filepath):
        return None
    with open(filepath, encoding=encoding) as f:
        return f.read()
