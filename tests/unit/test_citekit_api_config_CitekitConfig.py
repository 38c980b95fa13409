"""Tests for citekit/api/config/CitekitConfig.py."""

from pathlib import Path

import pytest

from citekit.api.config.CitekitConfig import CitekitConfig
from tests.conftest import write_config


def test_home_dir_from_env(citekit_home):
    assert CitekitConfig.get_home_dir() == citekit_home.resolve()
    assert CitekitConfig.get_config_path() == citekit_home.resolve() / "config.json"


def test_home_dir_default(monkeypatch):
    monkeypatch.delenv("CITEKIT_HOME")
    assert CitekitConfig.get_home_dir() == Path.home() / ".citekit"


def test_missing_file_gives_defaults():
    config = CitekitConfig.load()

    assert config.log.level == "INFO"
    assert config.log.file == "citekit.log"
    assert config.scope.folder is None
    assert config.extract.full_files is False


def test_load_partial(citekit_home):
    write_config(citekit_home, {"scope": {"folder": "~/docs"}, "log": {"level": "DEBUG"}})
    config = CitekitConfig.load()

    assert config.scope.folder == "~/docs"
    assert config.log.level == "DEBUG"
    assert config.log.backup_count == 3


def test_paths(citekit_home):
    config = CitekitConfig.load()
    assert config.log_path == citekit_home.resolve() / "citekit.log"
    assert config.extract_cache_dir == citekit_home.resolve() / "extract-cache"


def test_absolute_cache_dir(citekit_home, tmp_path):
    write_config(citekit_home, {"extract": {"cache_dir": str(tmp_path / "c")}})
    assert CitekitConfig.load().extract_cache_dir == tmp_path / "c"


def test_invalid_json(citekit_home):
    citekit_home.mkdir(parents=True)
    (citekit_home / "config.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        CitekitConfig.load()


def test_not_an_object(citekit_home):
    write_config(citekit_home, [1, 2])
    with pytest.raises(ValueError, match="expected an object"):
        CitekitConfig.load()


@pytest.mark.parametrize(
    "data",
    [
        {"unknown": 1},
        {"log": {"level": "LOUD"}},
        {"log": {"max_bytes": 0}},
        {"scope": {"folder": "  "}},
    ],
)
def test_validation_errors(citekit_home, data):
    write_config(citekit_home, data)
    with pytest.raises(ValueError, match="Configuration validation error"):
        CitekitConfig.load()


def test_to_dict():
    data = CitekitConfig().to_dict()
    assert set(data) == {"log", "scope", "extract"}
    assert data["extract"] == {"full_files": False, "cache_dir": "extract-cache"}


def test_unreadable_config(citekit_home):
    (citekit_home / "config.json").mkdir(parents=True)
    with pytest.raises(ValueError, match="Cannot read config file"):
        CitekitConfig.load()
