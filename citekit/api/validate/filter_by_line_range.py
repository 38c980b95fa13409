"""Restrict validation output to a range of source lines."""

import re

from .ValidationResult import ValidationResult

LINE_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)\s*)?$")


def parse_line_range(line_range: str) -> tuple[int, int]:
    """Parse ``"start-end"`` or a single ``"line"`` into an inclusive range.

    Raises:
        ValueError: If the text is not a range of positive line numbers
    """
    match = LINE_RANGE_PATTERN.match(line_range)
    if match is None:
        raise ValueError(f"Invalid line range: {line_range!r} (expected 'start-end' or 'line')")
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else start
    if start < 1 or end < start:
        raise ValueError(f"Invalid line range: {line_range!r}")
    return start, end


def filter_by_line_range(result: ValidationResult, line_range: str) -> ValidationResult:
    start, end = parse_line_range(line_range)
    return ValidationResult(
        file_path=result.file_path,
        links=[link for link in result.links if start <= link.line <= end],
    )
