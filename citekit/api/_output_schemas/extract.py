"""Output schema for extract commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ExtractOutput(BaseOutputSchema):
    """Output schema for extract links, header, and file.

    ``cached`` is true when a session marker showed the file was already
    extracted; the content fields are then empty.
    """

    path: str = Field(..., description="Source file, or target file for header/file extraction")
    cached: bool = Field(False, description="Skipped because this session already extracted the file")
    extracted_content_blocks: dict[str, Any] = Field(default_factory=dict, description="Blocks keyed by content id")
    outgoing_links_report: dict[str, Any] = Field(default_factory=lambda: {"processed_links": []})
    stats: dict[str, Any] = Field(default_factory=dict)
