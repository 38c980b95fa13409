"""An addressable point inside a document."""

from dataclasses import dataclass
from typing import Any

from ._constants import ANCHOR_BLOCK


@dataclass(frozen=True)
class AnchorObject:
    """Header or block anchor.

    ``url_encoded_id`` is only ever set on header anchors.
    """

    anchor_type: str
    id: str
    raw_text: str | None
    line: int
    column: int
    url_encoded_id: str | None = None

    def __post_init__(self) -> None:
        if self.anchor_type == ANCHOR_BLOCK and self.url_encoded_id is not None:
            raise ValueError(f"Block anchor cannot carry url_encoded_id: {self.id}")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "anchor_type": self.anchor_type,
            "id": self.id,
            "raw_text": self.raw_text,
            "line": self.line,
            "column": self.column,
        }
        if self.url_encoded_id is not None:
            data["url_encoded_id"] = self.url_encoded_id
        return data
