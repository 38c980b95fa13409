"""Markdown parser producing the parse output consumed by the engine."""

import logging
from pathlib import Path

from markdown_it import MarkdownIt

from ._code_lines import _code_lines
from ._extract_anchors import _extract_anchors
from ._extract_headings import _extract_headings
from ._extract_links import _extract_links
from .ParseOutput import ParseOutput

logger = logging.getLogger(__name__)


class MarkdownParser:
    """Tokenize markdown with markdown-it and pull out headings, anchors, and links."""

    def __init__(self) -> None:
        self.md = MarkdownIt("commonmark")

    def parse(self, file_path: str | Path) -> ParseOutput:
        """Read and parse a file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
        """
        path = Path(file_path)
        content = path.read_text(encoding="utf-8")
        logger.debug("Parsing %s (%d chars)", path, len(content))
        return self.parse_content(content, str(path))

    def parse_content(self, content: str, file_path: str) -> ParseOutput:
        tokens = self.md.parse(content)
        lines = content.split("\n")
        code_lines = _code_lines(tokens)
        headings = _extract_headings(tokens, lines)

        return ParseOutput(
            file_path=file_path,
            content=content,
            tokens=tokens,
            headings=headings,
            anchors=_extract_anchors(lines, headings, code_lines),
            links=_extract_links(lines, file_path, code_lines),
        )
