"""Enriched links of one file with their derived summary."""

from dataclasses import dataclass
from typing import Any

from ..parse.LinkObject import LinkObject
from .ValidationSummary import ValidationSummary


@dataclass
class ValidationResult:
    file_path: str
    links: list[LinkObject]

    @property
    def summary(self) -> ValidationSummary:
        return ValidationSummary.from_links(self.links)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "summary": self.summary.to_dict(),
            "links": [link.to_dict() for link in self.links],
        }
