"""Everything the parser knows about one file."""

from dataclasses import dataclass, field
from typing import Any

from .AnchorObject import AnchorObject
from .Heading import Heading
from .LinkObject import LinkObject


@dataclass
class ParseOutput:
    """Parse result for a single markdown file.

    ``tokens`` is the raw markdown-it token stream; nothing in the engine reads it.
    """

    file_path: str
    content: str
    tokens: list[Any] = field(default_factory=list)
    headings: list[Heading] = field(default_factory=list)
    anchors: list[AnchorObject] = field(default_factory=list)
    links: list[LinkObject] = field(default_factory=list)

    def to_dict(self, include_tokens: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {
            "file_path": self.file_path,
            "content": self.content,
            "headings": [h.to_dict() for h in self.headings],
            "anchors": [a.to_dict() for a in self.anchors],
            "links": [link.to_dict() for link in self.links],
        }
        if include_tokens:
            data["tokens"] = [{"type": t.type, "tag": t.tag, "map": t.map} for t in self.tokens]
        return data
