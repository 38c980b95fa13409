from urllib.parse import unquote


def normalize_block_id(anchor: str | None) -> str | None:
    """Strip the leading ``^`` from a block anchor."""
    if anchor and anchor.startswith("^"):
        return anchor[1:]
    return anchor


def decode_url_anchor(anchor: str | None) -> str | None:
    """Percent-decode a header anchor; malformed escapes are left as written."""
    if anchor is None:
        return None
    return unquote(anchor)
