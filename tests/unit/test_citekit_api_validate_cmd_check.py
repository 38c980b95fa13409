"""Tests for citekit/api/validate/cmd_check.py."""

from citekit.api.validate.cmd_check import cmd_check
from tests.conftest import run_cmd, write_config, write_md


def test_all_valid(corpus):
    res = run_cmd(cmd_check, path=str(corpus / "docs" / "source.md"))

    assert res.success is True
    assert res.output["summary"] == {"total": 3, "valid": 3, "warnings": 0, "errors": 0}
    assert res.output["errors"] == []
    assert len(res.output["links"]) == 3
    assert res.output["links"][0]["validation"] == {"status": "valid"}
    assert "3 valid" in res.result


def test_broken_anchor_fails_with_line_prefix(corpus):
    source = write_md(corpus, "docs/s.md", "[x](target.md#Nope)\n")
    res = run_cmd(cmd_check, path=str(source))

    assert res.success is False
    assert res.output["errors"] == ["Line 1: Anchor not found: #Nope"]
    assert res.output["summary"]["errors"] == 1


def test_warnings_do_not_fail(corpus):
    (corpus / "docs" / "guides").mkdir()
    source = write_md(corpus, "docs/s.md", "[g](guides/)\n")
    res = run_cmd(cmd_check, path=str(source))

    assert res.success is True
    assert res.output["warnings"][0].startswith("Line 1: Link points to a folder")


def test_line_range(corpus):
    res = run_cmd(cmd_check, path=str(corpus / "docs" / "source.md"), lines="4")
    assert res.output["summary"]["total"] == 1
    assert res.output["links"][0]["line"] == 4


def test_scope_from_config(corpus, citekit_home):
    write_md(corpus, "notes/other.md", "# Intro\n")
    source = write_md(corpus, "docs/s.md", "[o](other.md#Intro)\n")

    res = run_cmd(cmd_check, path=str(source))
    assert res.success is False

    write_config(citekit_home, {"scope": {"folder": str(corpus)}})
    res = run_cmd(cmd_check, path=str(source))
    assert res.success is True
    assert res.output["summary"]["warnings"] == 1


def test_missing_file(tmp_path):
    res = run_cmd(cmd_check, path=str(tmp_path / "missing.md"))
    assert res.success is False
    assert res.output["errors"][0].startswith("File not found:")


def test_invalid_config(corpus, citekit_home):
    write_config(citekit_home, {"bogus": True})
    res = run_cmd(cmd_check, path=str(corpus / "docs" / "source.md"))

    assert res.success is False
    assert "Configuration validation error" in res.output["errors"][0]


def test_bad_scope_folder(corpus):
    res = run_cmd(cmd_check, path=str(corpus / "docs" / "source.md"), scope=str(corpus / "nope"))
    assert res.success is False


def test_unreadable_source_is_reported(tmp_path):
    (tmp_path / "dir.md").mkdir()
    res = run_cmd(cmd_check, path=str(tmp_path / "dir.md"))

    assert res.success is False
    assert res.system_error is True
    assert res.output["errors"][0].startswith("Cannot read file:")


def test_broken_citation_is_not_a_system_error(corpus):
    source = write_md(corpus, "docs/s.md", "[x](gone.md)\n")
    res = run_cmd(cmd_check, path=str(source))
    assert res.success is False
    assert res.system_error is False
