"""Per-session markers recording which file contents were already extracted.

A marker is an empty file named ``<session>_<md5 of file bytes>``; editing the
file changes the key, so changed files are extracted again.
"""

import hashlib
from pathlib import Path


def _cache_key(session_id: str, file_path: str | Path) -> str:
    digest = hashlib.md5(Path(file_path).read_bytes()).hexdigest()
    return f"{session_id}_{digest}"


def check_extract_cache(session_id: str, file_path: str | Path, cache_dir: str | Path) -> bool:
    """Return True if this session already extracted the file in its current state."""
    directory = Path(cache_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return (directory / _cache_key(session_id, file_path)).exists()


def write_extract_cache(session_id: str, file_path: str | Path, cache_dir: str | Path) -> None:
    directory = Path(cache_dir)
    directory.mkdir(parents=True, exist_ok=True)
    (directory / _cache_key(session_id, file_path)).touch()
