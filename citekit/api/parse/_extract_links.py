"""Line-by-line link extraction."""

import os
import re

from ._code_lines import _inline_code_spans, _overlaps
from ._constants import LINK_TYPE_MARKDOWN, LINK_TYPE_WIKI, SCOPE_CROSS_DOCUMENT, SCOPE_INTERNAL
from ._detect_extraction_marker import _detect_extraction_marker
from ._determine_anchor_type import _determine_anchor_type
from ._resolve_target import _resolve_target
from .LinkObject import LinkObject
from .LinkTarget import LinkTarget
from .TargetPath import TargetPath

WIKILINK_PATTERN = re.compile(r"(!)?\[\[([^\]]+)\]\]")
MARKDOWN_LINK_PATTERN = re.compile(r"(!)?\[([^\[\]]*)\]\(((?:[^()\n]|\([^()\n]*\))+)\)")
CITE_PATTERN = re.compile(r"\[cite:\s*([^\]]+)\]")
CARET_PATTERN = re.compile(r"(?<![\w^])\^([A-Za-z0-9-]+)")
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
TITLE_PATTERN = re.compile(r"\s+\"[^\"]*\"$")
ALIAS_SEPARATOR_PATTERN = re.compile(r"\\?\|")
SEMVER_TAIL_PATTERN = re.compile(r"\.\d")


def _make_link(
    link_type: str,
    source_path: str,
    raw_path: str | None,
    anchor: str | None,
    text: str | None,
    match: re.Match,
    line: str,
    line_number: int,
) -> LinkObject:
    if raw_path:
        scope = SCOPE_CROSS_DOCUMENT
        target_path = _resolve_target(raw_path, source_path)
    else:
        scope = SCOPE_INTERNAL
        target_path = TargetPath(raw=None, absolute=None, relative=None)

    return LinkObject(
        link_type=link_type,
        scope=scope,
        anchor_type=_determine_anchor_type(anchor),
        source_path=source_path,
        target=LinkTarget(path=target_path, anchor=anchor),
        text=text,
        full_match=match.group(0),
        line=line_number,
        column=match.start(),
        extraction_marker=_detect_extraction_marker(line, match.end()),
    )


def _wiki_links(line: str, line_number: int, source_path: str, taken: list[tuple[int, int]]) -> list[LinkObject]:
    links = []
    for match in WIKILINK_PATTERN.finditer(line):
        if _overlaps(match.start(), match.end(), taken):
            continue
        taken.append(match.span())

        parts = ALIAS_SEPARATOR_PATTERN.split(match.group(2), maxsplit=1)
        target = parts[0].strip()
        alias = parts[1].strip() if len(parts) > 1 else None
        path, _, anchor = target.partition("#")
        path = path.strip()
        if path and not os.path.splitext(path)[1]:
            path = f"{path}.md"

        links.append(
            _make_link(
                LINK_TYPE_WIKI,
                source_path,
                path or None,
                anchor.strip() or None,
                alias or target,
                match,
                line,
                line_number,
            )
        )
    return links


def _markdown_links(line: str, line_number: int, source_path: str, taken: list[tuple[int, int]]) -> list[LinkObject]:
    links = []
    for match in MARKDOWN_LINK_PATTERN.finditer(line):
        if _overlaps(match.start(), match.end(), taken):
            continue
        taken.append(match.span())
        if match.group(1):
            continue  # image

        href = TITLE_PATTERN.sub("", match.group(3).strip())
        if href.startswith("<") and href.endswith(">"):
            href = href[1:-1]
        path, _, anchor = href.partition("#")
        if path and SCHEME_PATTERN.match(path):
            continue  # external URL
        if not path and not anchor:
            continue

        links.append(
            _make_link(
                LINK_TYPE_MARKDOWN, source_path, path or None, anchor or None, match.group(2), match, line, line_number
            )
        )
    return links


def _cite_links(line: str, line_number: int, source_path: str, taken: list[tuple[int, int]]) -> list[LinkObject]:
    links = []
    for match in CITE_PATTERN.finditer(line):
        if _overlaps(match.start(), match.end(), taken):
            continue
        taken.append(match.span())
        raw = match.group(1).strip()
        path, _, anchor = raw.partition("#")
        links.append(
            _make_link(
                LINK_TYPE_MARKDOWN, source_path, path.strip() or None, anchor or None, raw, match, line, line_number
            )
        )
    return links


def _caret_links(line: str, line_number: int, source_path: str, taken: list[tuple[int, int]]) -> list[LinkObject]:
    """Mid-line ``^id`` references; a trailing ``^id`` defines a block instead."""
    links = []
    for match in CARET_PATTERN.finditer(line):
        if _overlaps(match.start(), match.end(), taken):
            continue
        if SEMVER_TAIL_PATTERN.match(line, match.end()):
            continue
        if not line[match.end() :].strip():
            continue
        links.append(
            _make_link(LINK_TYPE_MARKDOWN, source_path, None, f"^{match.group(1)}", None, match, line, line_number)
        )
    return links


def _extract_links(lines: list[str], source_path: str, code_lines: set[int]) -> list[LinkObject]:
    links: list[LinkObject] = []
    for line_number, line in enumerate(lines, start=1):
        if line_number in code_lines:
            continue
        taken = _inline_code_spans(line)
        line_links = _wiki_links(line, line_number, source_path, taken)
        line_links += _markdown_links(line, line_number, source_path, taken)
        line_links += _cite_links(line, line_number, source_path, taken)
        line_links += _caret_links(line, line_number, source_path, taken)
        links.extend(sorted(line_links, key=lambda link: link.column))
    return links
