"""Corrected relative path from a source file to the target actually found."""

from dataclasses import dataclass

PATH_CONVERSION_TYPE = "path-conversion"


@dataclass(frozen=True)
class PathConversion:
    original: str
    recommended: str
    type: str = PATH_CONVERSION_TYPE

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "original": self.original, "recommended": self.recommended}
