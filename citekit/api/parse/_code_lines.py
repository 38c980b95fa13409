"""Locate code regions that must not yield links or anchors."""

from typing import Any

_CODE_TOKEN_TYPES = ("fence", "code_block")


def _code_lines(tokens: list[Any]) -> set[int]:
    """Return 1-based line numbers covered by fenced or indented code blocks."""
    lines: set[int] = set()
    for token in tokens:
        if token.type in _CODE_TOKEN_TYPES and token.map:
            start, end = token.map
            lines.update(range(start + 1, end + 1))
    return lines


def _inline_code_spans(line: str) -> list[tuple[int, int]]:
    """Return (start, end) spans of backtick code on a single line."""
    spans: list[tuple[int, int]] = []
    i = 0
    while i < len(line):
        if line[i] != "`":
            i += 1
            continue
        run = 1
        while i + run < len(line) and line[i + run] == "`":
            run += 1
        fence = "`" * run
        close = line.find(fence, i + run)
        if close == -1:
            break
        spans.append((i, close + run))
        i = close + run
    return spans


def _overlaps(start: int, end: int, spans: list[tuple[int, int]]) -> bool:
    return any(start < span_end and end > span_start for span_start, span_end in spans)
