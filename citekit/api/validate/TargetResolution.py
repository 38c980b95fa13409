"""Where a cross-document link path led."""

from dataclasses import dataclass, field

from ..scope.FileResolution import FileResolution


@dataclass
class TargetResolution:
    """Result of resolving a link path.

    ``path`` is set when a file was found. ``via_scope`` marks a file found only
    through the scope search. ``is_directory`` marks a path naming a folder.
    """

    standard_path: str
    path: str | None = None
    via_scope: bool = False
    is_directory: bool = False
    tried: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    scope_resolution: FileResolution | None = None
