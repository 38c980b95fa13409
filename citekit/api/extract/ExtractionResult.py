"""Aggregated output of one extraction run."""

import json
from dataclasses import dataclass, field
from typing import Any

from .ContentBlock import ContentBlock
from .ExtractionStats import ExtractionStats
from .ProcessedLink import ProcessedLink

TOTAL_LENGTH_KEY = "_total_content_character_length"


@dataclass
class ExtractionResult:
    blocks: dict[str, ContentBlock] = field(default_factory=dict)
    processed_links: list[ProcessedLink] = field(default_factory=list)
    stats: ExtractionStats = field(default_factory=ExtractionStats)

    @property
    def extracted_content_blocks(self) -> dict[str, Any]:
        """Block store keyed by content id, led by the serialized-size diagnostic.

        The size is measured before the diagnostic key itself is added.
        """
        serialized = {content_id: block.to_dict() for content_id, block in self.blocks.items()}
        size = len(json.dumps(serialized, ensure_ascii=False, separators=(",", ":")))
        return {TOTAL_LENGTH_KEY: size, **serialized}

    def to_dict(self) -> dict[str, Any]:
        return {
            "extracted_content_blocks": self.extracted_content_blocks,
            "outgoing_links_report": {"processed_links": [p.to_dict() for p in self.processed_links]},
            "stats": self.stats.to_dict(),
        }
