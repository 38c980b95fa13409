import re

_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_HIGHLIGHT_PATTERN = re.compile(r"==(.+?)==")


def _clean_markdown(text: str) -> str:
    """Drop inline markdown decoration so ``**Foo** `bar`` compares equal to ``Foo bar``."""
    text = _LINK_PATTERN.sub(r"\1", text)
    text = _HIGHLIGHT_PATTERN.sub(r"\1", text)
    return text.replace("**", "").replace("*", "").replace("`", "").strip()
