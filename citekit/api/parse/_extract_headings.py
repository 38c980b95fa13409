"""Headings from the markdown-it token stream."""

from typing import Any

from .Heading import Heading


def _extract_headings(tokens: list[Any], lines: list[str]) -> list[Heading]:
    headings: list[Heading] = []
    for index, token in enumerate(tokens):
        if token.type != "heading_open" or not token.map:
            continue
        inline = tokens[index + 1] if index + 1 < len(tokens) else None
        text = inline.content.strip() if inline is not None and inline.type == "inline" else ""
        line_index = token.map[0]
        raw = lines[line_index] if line_index < len(lines) else ""
        headings.append(Heading(level=int(token.tag[1:]), text=text, raw=raw, line=line_index + 1))
    return headings
