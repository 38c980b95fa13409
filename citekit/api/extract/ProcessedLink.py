"""Per-link outcome of an extraction run."""

from dataclasses import dataclass
from typing import Any

from ..parse.LinkObject import LinkObject

STATUS_SUCCESS = "success"
STATUS_SKIPPED = "skipped"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class ProcessedLink:
    """``content_id`` is set only on success; ``failure_reason`` only on skipped or error."""

    source_link: LinkObject
    status: str
    content_id: str | None = None
    eligibility_reason: str | None = None
    failure_reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "source_link": self.source_link.to_dict(),
            "status": self.status,
            "content_id": self.content_id,
            "eligibility_reason": self.eligibility_reason,
        }
        if self.failure_reason is not None:
            data["failure_details"] = {"reason": self.failure_reason}
        return data
