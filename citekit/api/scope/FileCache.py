"""Filename index over a scope folder."""

import logging
import os
import re
from pathlib import Path

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from .FileResolution import REASON_DUPLICATE, REASON_DUPLICATE_FUZZY, REASON_NOT_FOUND, FileResolution

logger = logging.getLogger(__name__)

TYPO_CORRECTIONS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"verson"), "version"),
    (re.compile(r"architeture"), "architecture"),
    (re.compile(r"managment"), "management"),
]
FUZZY_FILENAME_CUTOFF = 0.85


class FileCache:
    """Map bare markdown filenames to absolute paths under one scope folder.

    Names that occur more than once are tracked as duplicates and never resolved,
    since guessing between them would hide a real ambiguity.
    """

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.duplicates: set[str] = set()
        self.scope_folder: str | None = None

    def build_cache(self, scope_folder: str | Path) -> dict:
        """Scan the scope folder recursively for ``*.md`` files."""
        self.files.clear()
        self.duplicates.clear()

        absolute = Path(scope_folder).expanduser().absolute()
        scan_root = absolute.resolve()
        self.scope_folder = str(scan_root)

        for dirpath, dirnames, filenames in os.walk(scan_root, onerror=self._on_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename.endswith(".md"):
                    self._add(filename, os.path.join(dirpath, filename))

        for name in sorted(self.duplicates):
            logger.warning("Duplicate filename in scope %s: %s", scan_root, name)

        return {
            "total_files": len(self.files),
            "duplicates": len(self.duplicates),
            "scope_folder": str(absolute),
            "real_scope_folder": str(scan_root),
        }

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning("Could not read directory %s: %s", error.filename, error.strerror)

    def _add(self, filename: str, full_path: str) -> None:
        if filename in self.files:
            self.duplicates.add(filename)
        else:
            self.files[filename] = full_path

    def _lookup(self, filename: str) -> FileResolution | None:
        if filename not in self.files:
            return None
        if filename in self.duplicates:
            return FileResolution(
                found=False,
                reason=REASON_DUPLICATE,
                message=f'Multiple files named "{filename}" found in scope. Use relative path for disambiguation.',
            )
        return FileResolution(found=True, path=self.files[filename])

    def resolve_file(self, filename: str) -> FileResolution:
        """Find a file by bare name, falling back to fuzzy corrections."""
        filename = os.path.basename(filename)
        stem = filename.removesuffix(".md")
        for candidate in (filename, f"{stem}.md"):
            resolution = self._lookup(candidate)
            if resolution is not None:
                return resolution

        fuzzy = self._find_fuzzy_match(filename)
        if fuzzy is not None:
            return fuzzy

        return FileResolution(
            found=False, reason=REASON_NOT_FOUND, message=f'File "{filename}" not found in scope folder.'
        )

    def _corrected(self, filename: str, corrected: str, how: str) -> FileResolution | None:
        if corrected not in self.files:
            return None
        if corrected in self.duplicates:
            return FileResolution(
                found=False,
                reason=REASON_DUPLICATE_FUZZY,
                message=(
                    f'Found potential match "{corrected}" ({how}), but multiple files with this name exist. '
                    "Use relative path for disambiguation."
                ),
            )
        return FileResolution(
            found=True,
            path=self.files[corrected],
            fuzzy_match=True,
            corrected_filename=corrected,
            message=f'Auto-corrected {how}: "{filename}" -> "{corrected}"',
        )

    def _find_fuzzy_match(self, filename: str) -> FileResolution | None:
        if filename.endswith(".md.md"):
            resolution = self._corrected(filename, filename[: -len(".md")], "double extension")
            if resolution is not None:
                return resolution

        for pattern, replacement in TYPO_CORRECTIONS:
            if pattern.search(filename):
                resolution = self._corrected(filename, pattern.sub(replacement, filename), "typo")
                if resolution is not None:
                    return resolution

        target = filename if filename.endswith(".md") else f"{filename}.md"
        candidates = [name for name in self.files if name not in self.duplicates]
        best = process.extract(
            target, candidates, scorer=Levenshtein.normalized_similarity, limit=2, score_cutoff=FUZZY_FILENAME_CUTOFF
        )
        # a tie between two names is ambiguous
        if len(best) == 1 or (len(best) == 2 and best[0][1] > best[1][1]):
            return self._corrected(filename, best[0][0], "similar filename")
        return None

    def get_cache_stats(self) -> dict:
        return {
            "total_files": len(self.files),
            "duplicate_count": len(self.duplicates),
            "duplicates": sorted(self.duplicates),
        }
