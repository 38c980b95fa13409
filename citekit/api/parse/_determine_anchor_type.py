from ._constants import ANCHOR_BLOCK, ANCHOR_HEADER


def _determine_anchor_type(anchor: str | None) -> str | None:
    """Block when the anchor starts with ``^``, header for any other anchor."""
    if not anchor:
        return None
    return ANCHOR_BLOCK if anchor.startswith("^") else ANCHOR_HEADER
