"""Resolve the raw path of a cross-document link to a file on disk."""

import os
import re
from pathlib import Path
from urllib.parse import unquote

from ..scope.FileCache import FileCache
from .TargetResolution import TargetResolution

# vault-absolute form: "folder/file.md" written relative to the vault root
OBSIDIAN_ABSOLUTE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+/")


def _candidate_paths(raw: str, source_dir: str) -> tuple[str, list[str], list[str]]:
    """Return (standard path, ordered candidates, notes)."""
    decoded = unquote(raw)
    standard = os.path.normpath(os.path.join(source_dir, decoded))
    candidates = [standard]
    notes: list[str] = []

    if decoded != raw:
        candidates.append(os.path.normpath(os.path.join(source_dir, raw)))

    if OBSIDIAN_ABSOLUTE_PATTERN.match(decoded) and not os.path.isabs(decoded):
        notes.append("Detected Obsidian absolute path format")
        for parent in Path(source_dir).parents:
            candidates.append(os.path.normpath(os.path.join(str(parent), decoded)))

    real_dir = os.path.realpath(source_dir)
    if real_dir != source_dir:
        notes.append(f"Source via symlink: {source_dir} -> {real_dir}")
        candidates.append(os.path.normpath(os.path.join(real_dir, decoded)))

    return standard, list(dict.fromkeys(candidates)), notes


def _resolve_target_path(raw: str, source_path: str, file_cache: FileCache | None) -> TargetResolution:
    source_dir = os.path.dirname(source_path)
    standard, candidates, notes = _candidate_paths(raw, source_dir)
    resolution = TargetResolution(standard_path=standard, tried=candidates, notes=notes)

    for candidate in candidates:
        if os.path.isfile(candidate):
            resolution.path = candidate
            return resolution

    if os.path.isdir(standard):
        resolution.is_directory = True
        return resolution

    if file_cache is not None:
        found = file_cache.resolve_file(os.path.basename(unquote(raw)))
        resolution.scope_resolution = found
        if found.found and found.path:
            resolution.path = found.path
            resolution.via_scope = True

    return resolution
