"""Normalize a path for use as a cache key.

Expands the user home directory (~), makes the path absolute, collapses
``.``/``..`` and redundant separators, and resolves symlinks so that every
spelling of the same file yields the same key.
"""

from pathlib import Path


def normalize_path(path: str | Path) -> str:
    """Expand user and return the canonical absolute path as a string."""
    return str(Path(path).expanduser().resolve())
