"""Deduplicated unit of extracted content."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourceLinkRef:
    """Provenance: one link that produced a content block."""

    source_path: str
    raw_source_link: str
    source_line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_path": self.source_path,
            "raw_source_link": self.raw_source_link,
            "source_line": self.source_line,
        }


@dataclass
class ContentBlock:
    content: str
    source_links: list[SourceLinkRef] = field(default_factory=list)

    @property
    def content_length(self) -> int:
        return len(self.content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "content_length": self.content_length,
            "source_links": [ref.to_dict() for ref in self.source_links],
        }
