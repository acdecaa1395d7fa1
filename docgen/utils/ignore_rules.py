"""
Ignore Rules
============
Path exclusion driven by a plain-text pattern file (``.ignoreconfig``).

File format:
    - one pattern per line
    - blank lines and lines starting with ``#`` are skipped
    - surrounding whitespace is stripped

Matching:
    A path is ignored when ANY pattern occurs in it as a plain substring.
    There are no globs, no path normalisation and no precedence between
    patterns, so ``node_modules`` also matches ``my_node_modules_backup``.

The loaded patterns are returned as a tuple and passed explicitly to every
caller; they never change during a run.
"""
import logging
import os
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)


def load_ignore_patterns(config_path: str) -> Tuple[str, ...]:
    """
    Load ignore patterns from ``config_path``.

    Parameters
    ----------
    config_path : str
        Path to the pattern file.

    Returns
    -------
    tuple of str
        Patterns in file order. Empty when the file does not exist.
    """
    if not os.path.exists(config_path):
        logger.debug("No ignore file at %s, nothing will be skipped", config_path)
        return ()

    with open(config_path, "r", encoding="utf-8") as f:
        raw = f.read()

    patterns = []
    for line in raw.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)

    logger.info("Loaded %d ignore pattern(s) from %s", len(patterns), config_path)
    return tuple(patterns)


def should_ignore(path: str, patterns: Iterable[str]) -> bool:
    """Return True if any pattern is a substring of ``path``."""
    return any(pattern in path for pattern in patterns)
