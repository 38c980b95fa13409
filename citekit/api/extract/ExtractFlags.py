from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractFlags:
    """Caller intent for an extraction run."""

    full_files: bool = False
