from citekit.api.extract.extract_cache import check_extract_cache, write_extract_cache


def test_marker_round_trip(tmp_path):
    source = tmp_path / "doc.md"
    source.write_text("content", encoding="utf-8")
    cache_dir = tmp_path / "cache"

    assert check_extract_cache("s1", source, cache_dir) is False
    assert cache_dir.is_dir()

    write_extract_cache("s1", source, cache_dir)
    assert check_extract_cache("s1", source, cache_dir) is True
    assert check_extract_cache("s2", source, cache_dir) is False


def test_changed_content_misses(tmp_path):
    source = tmp_path / "doc.md"
    source.write_text("before", encoding="utf-8")
    write_extract_cache("s1", source, tmp_path)

    source.write_text("after", encoding="utf-8")
    assert check_extract_cache("s1", source, tmp_path) is False


def test_identical_content_shares_marker(tmp_path):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("same", encoding="utf-8")
    b.write_text("same", encoding="utf-8")

    write_extract_cache("s1", a, tmp_path / "cache")
    assert check_extract_cache("s1", b, tmp_path / "cache") is True
