"""
Logging configuration using loguru.

The CLI calls setup_logging() once per invocation with the level derived from
the ``-d`` verbosity flag. Log records go to stderr so they never mix with
search results on stdout.
"""

import sys

from loguru import logger

VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG", "TRACE")
LOG_FORMAT = "<level>[{level.name}]</level> {message}"


def level_for_verbosity(verbosity: int) -> str:
    """Map a ``-d`` count to a loguru level name (0 = WARNING ... 3+ = TRACE)."""
    return VERBOSITY_LEVELS[min(max(verbosity, 0), len(VERBOSITY_LEVELS) - 1)]


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
