"""
noted exception hierarchy.

All noted exceptions inherit from NotedError, so the CLI can catch every
expected failure in one place while the core still raises specific types.
"""


class NotedError(Exception):
    """Base exception class for all noted errors."""


class ConfigurationError(NotedError):
    """Raised for configuration errors (invalid values, malformed config file)."""


class PatternError(NotedError):
    """Raised for empty or malformed glob/regex patterns."""


class NoteNotFoundError(NotedError):
    """Raised when a valid file pattern matched no note files."""


class InvalidInputError(NotedError):
    """Raised for invalid user input, such as an empty search string."""


class FileIOError(NotedError):
    """Raised when a note file cannot be read or written; ``path`` names the file."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
