"""A markdown heading."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    raw: str
    line: int

    def to_dict(self) -> dict:
        return asdict(self)
