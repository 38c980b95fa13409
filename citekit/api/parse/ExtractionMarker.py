"""Directive token found immediately after a link."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionMarker:
    """A ``%%text%%`` or ``<!-- text -->`` marker trailing a link."""

    full_match: str
    inner_text: str

    def to_dict(self) -> dict[str, str]:
        return {"full_match": self.full_match, "inner_text": self.inner_text}
