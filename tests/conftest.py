"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning the CLI and the engine")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def citekit_home(tmp_path: Path, monkeypatch) -> Path:
    """Point CITEKIT_HOME at a per-test directory so no test touches ~/.citekit."""
    home = tmp_path / ".citekit"
    monkeypatch.setenv("CITEKIT_HOME", str(home))
    return home


def write_config(home: Path, data: dict) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    path = home / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def write_md(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


TARGET_MD = "\n".join(
    [
        "# Target Doc",
        "",
        "Intro paragraph.",
        "",
        "## Setup Steps",
        "",
        "Install the tool.",
        "",
        "### Details",
        "",
        "More details here.",
        "",
        "## Usage",
        "",
        "Use it. ^usage-block",
        "",
        "Final line.",
        "",
    ]
)

SETUP_SECTION = "## Setup Steps\n\nInstall the tool.\n\n### Details\n\nMore details here."

SOURCE_MD = "\n".join(
    [
        "# Source",
        "",
        "See [setup](target.md#Setup%20Steps) for installation.",
        "Block: [usage](target.md#^usage-block)",
        "Whole: [target](target.md)",
        "",
    ]
)


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A docs folder with a source citing three locations in a target."""
    root = tmp_path.resolve()
    write_md(root, "docs/target.md", TARGET_MD)
    write_md(root, "docs/source.md", SOURCE_MD)
    return root
