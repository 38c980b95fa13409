"""Counts of validation outcomes."""

from collections.abc import Iterable
from dataclasses import asdict, dataclass

from ..parse.LinkObject import LinkObject
from ._constants import STATUS_ERROR, STATUS_VALID, STATUS_WARNING


@dataclass(frozen=True)
class ValidationSummary:
    total: int
    valid: int
    warnings: int
    errors: int

    @classmethod
    def from_links(cls, links: Iterable[LinkObject]) -> "ValidationSummary":
        """Count statuses on enriched links.

        Raises:
            ValueError: If a link has not been validated yet
        """
        counts = {STATUS_VALID: 0, STATUS_WARNING: 0, STATUS_ERROR: 0}
        for link in links:
            if link.validation is None:
                raise ValueError(f"Link at line {link.line} has no validation record")
            counts[link.validation.status] += 1
        return cls(
            total=sum(counts.values()),
            valid=counts[STATUS_VALID],
            warnings=counts[STATUS_WARNING],
            errors=counts[STATUS_ERROR],
        )

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
