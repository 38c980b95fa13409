"""Validation record attached to a link."""

from dataclasses import dataclass
from typing import Any

from ._constants import STATUS_ERROR, STATUS_VALID, STATUS_WARNING, STATUSES
from .PathConversion import PathConversion


@dataclass(frozen=True)
class ValidationMetadata:
    """Tagged validation outcome.

    A ``valid`` record carries nothing else. ``warning`` and ``error`` records
    always carry an ``error`` message and a ``reason`` code, and may carry a
    suggestion, a path conversion, and a list of similar anchors.
    """

    status: str
    error: str | None = None
    reason: str | None = None
    suggestion: str | None = None
    path_conversion: PathConversion | None = None
    similar_anchors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.status not in STATUSES:
            raise ValueError(f"Unknown validation status: {self.status}")
        if self.status == STATUS_VALID:
            if self.error or self.suggestion or self.path_conversion or self.reason or self.similar_anchors:
                raise ValueError("A valid record cannot carry error details")
        elif not self.error:
            raise ValueError(f"A {self.status} record requires an error message")

    @classmethod
    def ok(cls) -> "ValidationMetadata":
        return cls(status=STATUS_VALID)

    @classmethod
    def warn(cls, error: str, reason: str, **details: Any) -> "ValidationMetadata":
        return cls(status=STATUS_WARNING, error=error, reason=reason, **details)

    @classmethod
    def fail(cls, error: str, reason: str, **details: Any) -> "ValidationMetadata":
        return cls(status=STATUS_ERROR, error=error, reason=reason, **details)

    @property
    def is_valid(self) -> bool:
        return self.status == STATUS_VALID

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"status": self.status}
        if self.error is not None:
            data["error"] = self.error
        if self.reason is not None:
            data["reason"] = self.reason
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        if self.path_conversion is not None:
            data["path_conversion"] = self.path_conversion.to_dict()
        if self.similar_anchors:
            data["similar_anchors"] = list(self.similar_anchors)
        return data
