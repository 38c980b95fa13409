"""Output schema for the ast command."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ParseAstOutput(BaseOutputSchema):
    path: str = Field(..., description="Absolute path of the parsed file")
    token_count: int = Field(0, description="Number of markdown-it block tokens")
    headings: list[dict[str, Any]] = Field(default_factory=list)
    anchors: list[dict[str, Any]] = Field(default_factory=list)
    links: list[dict[str, Any]] = Field(default_factory=list)
