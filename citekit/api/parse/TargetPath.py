"""Target path of a link in its three spellings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetPath:
    """Path as written, resolved absolute, and relative to the source directory.

    All three are None for a link that has no path part.
    """

    raw: str | None
    absolute: str | None
    relative: str | None

    def to_dict(self) -> dict[str, str | None]:
        return {"raw": self.raw, "absolute": self.absolute, "relative": self.relative}
