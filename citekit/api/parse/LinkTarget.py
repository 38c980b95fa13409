"""Where a link points."""

from dataclasses import dataclass

from .TargetPath import TargetPath


@dataclass(frozen=True)
class LinkTarget:
    path: TargetPath
    anchor: str | None

    def to_dict(self) -> dict:
        return {"path": self.path.to_dict(), "anchor": self.anchor}
