from dataclasses import dataclass


@dataclass(frozen=True)
class EligibilityDecision:
    """Whether a link's content should be extracted, and why."""

    eligible: bool
    reason: str

    def to_dict(self) -> dict:
        return {"eligible": self.eligible, "reason": self.reason}
