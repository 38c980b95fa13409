"""Output schema for the validate command."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ValidateCheckOutput(BaseOutputSchema):
    """Output schema for validate.

    Output structure:
    - errors / warnings: one message per non-valid link, prefixed with its line
    - path: absolute path of the validated file
    - summary: total, valid, warnings, errors counts
    - links: enriched links, each with its validation record
    """

    path: str = Field(..., description="Absolute path of the validated file")
    summary: dict[str, int] = Field(default_factory=dict, description="Counts by validation status")
    links: list[dict[str, Any]] = Field(default_factory=list, description="Enriched link objects")
