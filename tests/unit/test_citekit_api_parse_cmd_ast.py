"""Tests for citekit/api/parse/cmd_ast.py."""

from citekit.api.parse.cmd_ast import cmd_ast
from tests.conftest import run_cmd


def test_target_structure(corpus):
    res = run_cmd(cmd_ast, path=str(corpus / "docs" / "target.md"))

    assert res.success is True
    assert [h["text"] for h in res.output["headings"]] == ["Target Doc", "Setup Steps", "Details", "Usage"]
    assert any(a["id"] == "usage-block" and a["anchor_type"] == "block" for a in res.output["anchors"])
    assert res.output["links"] == []
    assert res.output["token_count"] > 0


def test_source_links(corpus):
    res = run_cmd(cmd_ast, path=str(corpus / "docs" / "source.md"))
    assert [link["line"] for link in res.output["links"]] == [3, 4, 5]


def test_missing_file(tmp_path):
    res = run_cmd(cmd_ast, path=str(tmp_path / "missing.md"))
    assert res.success is False
    assert res.output["errors"][0].startswith("Cannot read file")
