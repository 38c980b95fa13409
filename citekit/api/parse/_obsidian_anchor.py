"""Obsidian-compatible anchor text."""

import re
from urllib.parse import quote

# Characters Obsidian drops from heading links
OBSIDIAN_INVALID_PATTERN = re.compile(r"\[\[|\]\]|%%|[:|^#]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_heading_text(text: str) -> str:
    """Strip Obsidian-invalid characters and collapse whitespace."""
    return WHITESPACE_PATTERN.sub(" ", OBSIDIAN_INVALID_PATTERN.sub("", text)).strip()


def url_encode_heading(text: str) -> str:
    """Percent-encode normalized heading text the way encodeURIComponent does."""
    return quote(normalize_heading_text(text), safe="!~*'()")
