"""Tests for citekit/api/extract/cmd_header.py and cmd_file.py."""

from citekit.api.extract.cmd_file import cmd_file
from citekit.api.extract.cmd_header import cmd_header
from tests.conftest import SETUP_SECTION, TARGET_MD, run_cmd


def _contents(output: dict) -> list[str]:
    return [block["content"] for key, block in output["extracted_content_blocks"].items() if not key.startswith("_")]


def test_header(corpus):
    target = corpus / "docs" / "target.md"
    res = run_cmd(cmd_header, target=str(target), header="Setup Steps")

    assert res.success is True
    assert res.output["path"] == str(target)
    assert _contents(res.output) == [SETUP_SECTION]
    processed = res.output["outgoing_links_report"]["processed_links"][0]
    assert processed["eligibility_reason"] == "Markdown anchor links eligible by default"


def test_header_encoded(corpus):
    res = run_cmd(cmd_header, target=str(corpus / "docs" / "target.md"), header="Setup%20Steps")
    assert _contents(res.output) == [SETUP_SECTION]


def test_header_relative_to_cwd(corpus, monkeypatch):
    monkeypatch.chdir(corpus / "docs")
    res = run_cmd(cmd_header, target="target.md", header="Usage")
    assert _contents(res.output) == ["## Usage\n\nUse it. ^usage-block\n\nFinal line."]


def test_header_missing(corpus):
    res = run_cmd(cmd_header, target=str(corpus / "docs" / "target.md"), header="Nope")
    assert _contents(res.output) == []
    assert res.output["warnings"] == ["Line 0: Heading not found: Nope"]


def test_file(corpus, monkeypatch):
    monkeypatch.chdir(corpus / "docs")
    res = run_cmd(cmd_file, target="target.md")

    assert res.success is True
    assert res.output["path"] == str(corpus / "docs" / "target.md")
    assert _contents(res.output) == [TARGET_MD]
    assert res.output["stats"]["total_links"] == 1


def test_file_missing(corpus):
    res = run_cmd(cmd_file, target=str(corpus / "docs" / "nope.md"))
    assert res.success is False
    assert res.output["errors"][0].startswith("Line 0: Extraction failed")
