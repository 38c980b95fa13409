from ..parse._constants import ANCHOR_BLOCK, ANCHOR_HEADER
from ..parse.ParsedDocument import ParsedDocument

_LISTED = 5


def _anchor_suggestion(document: ParsedDocument, similar: list[str]) -> str:
    """Human-readable hint for a missing anchor."""
    parts: list[str] = []
    if similar:
        parts.append(f"Similar anchors: {', '.join(similar[:3])}")

    anchors = document.get_anchors()
    headers = [a for a in anchors if a.anchor_type == ANCHOR_HEADER][:_LISTED]
    if headers:
        listed = ", ".join(f'"{a.raw_text}" -> #{a.url_encoded_id}' for a in headers)
        parts.append(f"Available headers: {listed}")

    blocks = [a for a in anchors if a.anchor_type == ANCHOR_BLOCK][:_LISTED]
    if blocks:
        parts.append(f"Available block refs: {', '.join('^' + a.id for a in blocks)}")

    return "; ".join(parts) if parts else "No anchors found in target document"
