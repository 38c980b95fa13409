"""Query facade over a parse output."""

from urllib.parse import unquote

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from ._clean_markdown import _clean_markdown
from ._constants import ANCHOR_BLOCK, ANCHOR_HEADER
from ._obsidian_anchor import normalize_heading_text
from .AnchorObject import AnchorObject
from .Heading import Heading
from .LinkObject import LinkObject
from .ParseOutput import ParseOutput

SIMILARITY_THRESHOLD = 0.3
MAX_SIMILAR_ANCHORS = 5


class ParsedDocument:
    """Anchor lookup and content extraction for one parsed file.

    Consumers go through this facade rather than reading parse output fields
    directly, so the parse representation can change without touching them.
    """

    def __init__(self, parse_output: ParseOutput):
        self._data = parse_output

    @property
    def file_path(self) -> str:
        return self._data.file_path

    @property
    def parse_output(self) -> ParseOutput:
        return self._data

    def get_links(self) -> list[LinkObject]:
        return self._data.links

    def get_headings(self) -> list[Heading]:
        return self._data.headings

    def get_anchors(self) -> list[AnchorObject]:
        return self._data.anchors

    def anchor_ids(self) -> list[str]:
        """All anchor ids plus header url-encoded ids, without duplicates."""
        ids: list[str] = []
        for anchor in self._data.anchors:
            ids.append(anchor.id)
            if anchor.url_encoded_id is not None:
                ids.append(anchor.url_encoded_id)
        return list(dict.fromkeys(ids))

    def has_anchor(self, anchor_id: str) -> bool:
        """Exact match on the anchor id or a header's url-encoded id."""
        return any(
            a.id == anchor_id or (a.anchor_type == ANCHOR_HEADER and a.url_encoded_id == anchor_id)
            for a in self._data.anchors
        )

    def find_anchor(self, anchor: str) -> AnchorObject | None:
        """Locate an anchor by any accepted spelling.

        Tries, in order: literal id, header url-encoded id, the url-decoded anchor
        against normalized heading text, caret-prefixed block ids, and finally a
        comparison with inline markdown stripped from both sides.
        """
        anchors = self._data.anchors
        for a in anchors:
            if a.id == anchor or (a.anchor_type == ANCHOR_HEADER and a.url_encoded_id == anchor):
                return a

        decoded = unquote(anchor)
        normalized = normalize_heading_text(decoded)
        for a in anchors:
            if a.anchor_type != ANCHOR_HEADER:
                continue
            if a.id == decoded or (normalized and normalize_heading_text(a.raw_text or a.id) == normalized):
                return a

        if decoded.startswith("^"):
            block_id = decoded[1:]
            for a in anchors:
                if a.anchor_type == ANCHOR_BLOCK and a.id == block_id:
                    return a

        cleaned = _clean_markdown(decoded)
        if cleaned:
            for a in anchors:
                if _clean_markdown(a.raw_text or a.id) == cleaned:
                    return a
        return None

    def find_similar_anchors(self, anchor: str, limit: int = MAX_SIMILAR_ANCHORS) -> list[str]:
        """Closest anchor ids by normalized Levenshtein similarity, best first."""
        matches = process.extract(
            anchor,
            self.anchor_ids(),
            scorer=Levenshtein.normalized_similarity,
            processor=str.lower,
            limit=limit,
            score_cutoff=SIMILARITY_THRESHOLD,
        )
        return [choice for choice, _score, _index in matches]

    def extract_section(self, heading_text: str, level: int | None = None) -> str | None:
        """Return a heading and its body up to the next heading of equal or shallower depth."""
        anchor = self.find_anchor(heading_text)
        if anchor is None or anchor.anchor_type != ANCHOR_HEADER:
            return None

        heading = next(
            (h for h in self._data.headings if h.line == anchor.line and (level is None or h.level == level)),
            None,
        )
        if heading is None:
            return None

        lines = self._data.content.split("\n")
        end = len(lines)
        for other in self._data.headings:
            if other.line > heading.line and other.level <= heading.level:
                end = other.line - 1
                break
        return "\n".join(lines[heading.line - 1 : end]).rstrip("\n")

    def extract_block(self, block_id: str) -> str | None:
        """Return the single line carrying the block anchor."""
        block_id = block_id.removeprefix("^")
        anchor = next((a for a in self._data.anchors if a.anchor_type == ANCHOR_BLOCK and a.id == block_id), None)
        if anchor is None:
            return None
        lines = self._data.content.split("\n")
        if not 1 <= anchor.line <= len(lines):
            return None
        return lines[anchor.line - 1]

    def extract_full_content(self) -> str:
        return self._data.content
