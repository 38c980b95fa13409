from pathlib import Path

import pytest

from citekit.api.parse.MarkdownParser import MarkdownParser

DOC = "\n".join(
    [
        "# Title",
        "",
        "Link to [guide](guide.md#Getting%20Started) and [site](https://example.com).",
        "Internal [jump](#Title) plus [[notes#Ideas|my notes]] and [[#Title]].",
        "Cite [cite: refs/paper.md] here.",
        "Block ref ^req-1 mid line and version ^1.2.3.",
        "`[code](inline.md)` should be skipped.",
        "",
        "```md",
        "[fenced](fenced.md)",
        "```",
        "",
        "## Second Heading {#custom}",
        "",
        "A block line ^blk-1",
        "==**Key Term**== defined.",
        "[stop](other.md) %% stop-extract-link %%",
        "",
    ]
)


@pytest.fixture
def parsed():
    return MarkdownParser().parse_content(DOC, "/virtual/doc.md")


def test_headings(parsed):
    assert [(h.level, h.text, h.line) for h in parsed.headings] == [
        (1, "Title", 1),
        (2, "Second Heading {#custom}", 13),
    ]
    assert parsed.headings[1].raw == "## Second Heading {#custom}"


def test_link_count_skips_external_and_code(parsed):
    full_matches = [link.full_match for link in parsed.links]
    assert len(parsed.links) == 7
    assert "[site](https://example.com)" not in full_matches
    assert "[code](inline.md)" not in full_matches
    assert "[fenced](fenced.md)" not in full_matches


def test_markdown_cross_document_link(parsed):
    link = parsed.links[0]
    assert link.link_type == "markdown"
    assert link.scope == "cross-document"
    assert link.anchor_type == "header"
    assert link.target.anchor == "Getting%20Started"
    assert link.target.path.raw == "guide.md"
    assert link.target.path.absolute == str(Path("/virtual/guide.md"))
    assert link.target.path.relative == "guide.md"
    assert link.source_path == "/virtual/doc.md"
    assert (link.line, link.column) == (3, 8)
    assert link.text == "guide"
    assert link.validation is None


def test_internal_and_wiki_links_in_column_order(parsed):
    line_four = [link for link in parsed.links if link.line == 4]
    assert [link.full_match for link in line_four] == ["[jump](#Title)", "[[notes#Ideas|my notes]]", "[[#Title]]"]

    jump, wiki, wiki_internal = line_four
    assert jump.scope == "internal"
    assert jump.target.path.raw is None
    assert wiki.link_type == "wiki"
    assert wiki.target.path.raw == "notes.md"
    assert wiki.target.anchor == "Ideas"
    assert wiki.text == "my notes"
    assert wiki_internal.scope == "internal"
    assert wiki_internal.target.anchor == "Title"


def test_cite_link(parsed):
    cite = next(link for link in parsed.links if link.line == 5)
    assert cite.scope == "cross-document"
    assert cite.target.path.raw == "refs/paper.md"
    assert cite.anchor_type is None


def test_caret_reference_is_internal_block_link(parsed):
    carets = [link for link in parsed.links if link.line == 6]
    assert len(carets) == 1  # the semantic version is ignored
    assert carets[0].target.anchor == "^req-1"
    assert carets[0].anchor_type == "block"
    assert carets[0].scope == "internal"


def test_extraction_marker(parsed):
    stop = parsed.links[-1]
    assert stop.line == 17
    assert stop.extraction_marker is not None
    assert stop.extraction_marker.inner_text == "stop-extract-link"
    assert stop.extraction_marker.full_match == "%% stop-extract-link %%"
    assert parsed.links[0].extraction_marker is None


def test_html_comment_marker():
    parsed = MarkdownParser().parse_content("[a](a.md) <!-- force-extract -->\n", "/virtual/doc.md")
    assert parsed.links[0].extraction_marker.inner_text == "force-extract"


def test_marker_must_follow_link_directly():
    parsed = MarkdownParser().parse_content("[a](a.md) text %% force-extract %%\n", "/virtual/doc.md")
    assert parsed.links[0].extraction_marker is None


def test_anchors(parsed):
    by_id = {a.id: a for a in parsed.anchors}
    assert by_id["blk-1"].anchor_type == "block"
    assert (by_id["blk-1"].line, by_id["blk-1"].column) == (15, 13)
    assert by_id["blk-1"].url_encoded_id is None
    assert by_id["Key Term"].anchor_type == "block"
    assert by_id["Key Term"].raw_text == "==**Key Term**=="
    assert by_id["Title"].url_encoded_id == "Title"
    assert by_id["custom"].raw_text == "Second Heading"
    assert by_id["Second Heading"].url_encoded_id == "Second%20Heading"
    assert "req-1" not in by_id  # mid-line caret is a reference, not a definition


def test_header_url_encoding_strips_obsidian_characters():
    parsed = MarkdownParser().parse_content("## Phase 1: Setup | Notes\n", "/virtual/doc.md")
    header = parsed.anchors[0]
    assert header.id == "Phase 1: Setup | Notes"
    assert header.url_encoded_id == "Phase%201%20Setup%20Notes"


def test_markdown_link_with_title_and_angle_brackets():
    parsed = MarkdownParser().parse_content('[a](<my file.md> "Title") [b](b.md "B")\n', "/virtual/doc.md")
    assert [link.target.path.raw for link in parsed.links] == ["my file.md", "b.md"]


def test_images_are_not_citations():
    parsed = MarkdownParser().parse_content("![diagram](diagram.md)\n", "/virtual/doc.md")
    assert parsed.links == []


def test_parse_reads_file(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("# Hello\n\n[x](other.md)\n", encoding="utf-8")
    parsed = MarkdownParser().parse(path)
    assert parsed.file_path == str(path)
    assert parsed.content.startswith("# Hello")
    assert len(parsed.links) == 1
    assert parsed.links[0].target.path.absolute == str(tmp_path / "other.md")


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MarkdownParser().parse(tmp_path / "nope.md")


def test_to_dict_omits_tokens_by_default(parsed):
    data = parsed.to_dict()
    assert "tokens" not in data
    assert data["links"][0]["target"]["anchor"] == "Getting%20Started"
    assert "tokens" in parsed.to_dict(include_tokens=True)
