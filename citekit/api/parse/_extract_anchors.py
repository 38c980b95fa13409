"""Anchor definitions: block ids, emphasis markers, and headings."""

import re

from ._constants import ANCHOR_BLOCK, ANCHOR_HEADER
from ._obsidian_anchor import url_encode_heading
from .AnchorObject import AnchorObject
from .Heading import Heading

BLOCK_ANCHOR_PATTERN = re.compile(r"(?:^|\s)\^([A-Za-z0-9_-]+)\s*$")
EMPHASIS_ANCHOR_PATTERN = re.compile(r"==\*\*([^*]+)\*\*==")
EXPLICIT_ID_PATTERN = re.compile(r"^(.*?)\s*\{#([^}]+)\}\s*$")


def _split_explicit_id(text: str) -> tuple[str, str | None]:
    """Split ``Title {#custom-id}`` into (title, custom-id)."""
    match = EXPLICIT_ID_PATTERN.match(text)
    if match is None:
        return text, None
    return match.group(1).strip(), match.group(2).strip()


def _extract_anchors(lines: list[str], headings: list[Heading], code_lines: set[int]) -> list[AnchorObject]:
    anchors: list[AnchorObject] = []

    for line_number, line in enumerate(lines, start=1):
        if line_number in code_lines:
            continue

        block = BLOCK_ANCHOR_PATTERN.search(line)
        if block:
            anchors.append(
                AnchorObject(
                    anchor_type=ANCHOR_BLOCK,
                    id=block.group(1),
                    raw_text=None,
                    line=line_number,
                    column=block.start(1) - 1,
                )
            )

        for match in EMPHASIS_ANCHOR_PATTERN.finditer(line):
            anchors.append(
                AnchorObject(
                    anchor_type=ANCHOR_BLOCK,
                    id=match.group(1),
                    raw_text=match.group(0),
                    line=line_number,
                    column=match.start(),
                )
            )

    for heading in headings:
        title, explicit_id = _split_explicit_id(heading.text)
        if explicit_id:
            anchors.append(
                AnchorObject(
                    anchor_type=ANCHOR_HEADER,
                    id=explicit_id,
                    raw_text=title,
                    line=heading.line,
                    column=0,
                    url_encoded_id=explicit_id,
                )
            )
        anchors.append(
            AnchorObject(
                anchor_type=ANCHOR_HEADER,
                id=title,
                raw_text=title,
                line=heading.line,
                column=0,
                url_encoded_id=url_encode_heading(title),
            )
        )

    return anchors
