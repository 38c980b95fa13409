"""One citation occurrence in a markdown document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .ExtractionMarker import ExtractionMarker
from .LinkTarget import LinkTarget

if TYPE_CHECKING:
    from ..validate.ValidationMetadata import ValidationMetadata


@dataclass
class LinkObject:
    """A link as produced by the parser.

    ``validation`` is None until the validator enriches the link. The link is the
    single owner of its validation record; nothing else tracks link status.
    """

    link_type: str
    scope: str
    anchor_type: str | None
    source_path: str
    target: LinkTarget
    text: str | None
    full_match: str
    line: int
    column: int
    extraction_marker: ExtractionMarker | None = None
    validation: ValidationMetadata | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "link_type": self.link_type,
            "scope": self.scope,
            "anchor_type": self.anchor_type,
            "source": {"path": {"absolute": self.source_path}},
            "target": self.target.to_dict(),
            "text": self.text,
            "full_match": self.full_match,
            "line": self.line,
            "column": self.column,
            "extraction_marker": self.extraction_marker.to_dict() if self.extraction_marker else None,
            "validation": self.validation.to_dict() if self.validation else None,
        }
