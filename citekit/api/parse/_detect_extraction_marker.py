import re

from .ExtractionMarker import ExtractionMarker

MARKER_PATTERN = re.compile(r"\s*(%%(.+?)%%|<!--\s*(.+?)\s*-->)")


def _detect_extraction_marker(line: str, link_end: int) -> ExtractionMarker | None:
    """Return the marker directly following a link, if any."""
    match = MARKER_PATTERN.match(line, link_end)
    if match is None:
        return None
    inner = match.group(2) if match.group(2) is not None else match.group(3)
    return ExtractionMarker(full_match=match.group(1), inner_text=inner.strip())
