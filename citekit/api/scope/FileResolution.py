"""Outcome of a filename lookup in the scope cache."""

from dataclasses import dataclass

REASON_DUPLICATE = "duplicate"
REASON_DUPLICATE_FUZZY = "duplicate_fuzzy"
REASON_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class FileResolution:
    found: bool
    path: str | None = None
    reason: str | None = None
    message: str | None = None
    fuzzy_match: bool = False
    corrected_filename: str | None = None
