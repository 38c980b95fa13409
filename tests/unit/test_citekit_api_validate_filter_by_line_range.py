import pytest

from citekit.api.validate.CitationValidator import CitationValidator
from citekit.api.validate.filter_by_line_range import filter_by_line_range, parse_line_range


@pytest.mark.parametrize(
    "text,expected",
    [("3-5", (3, 5)), ("7", (7, 7)), (" 2 - 4 ", (2, 4))],
)
def test_parse_line_range(text, expected):
    assert parse_line_range(text) == expected


@pytest.mark.parametrize("text", ["", "a-b", "5-3", "0-2", "1-2-3"])
def test_parse_line_range_invalid(text):
    with pytest.raises(ValueError, match="Invalid line range"):
        parse_line_range(text)


@pytest.mark.asyncio
async def test_filter_recomputes_summary(corpus):
    result = await CitationValidator().validate_file(corpus / "docs" / "source.md")
    filtered = filter_by_line_range(result, "4-5")

    assert [link.line for link in filtered.links] == [4, 5]
    assert filtered.summary.total == 2
