import pytest

from citekit.api.extract.analyze_eligibility import ELIGIBILITY_STRATEGIES, analyze_eligibility
from citekit.api.extract.EligibilityDecision import EligibilityDecision
from citekit.api.extract.ExtractFlags import ExtractFlags
from citekit.api.parse.ExtractionMarker import ExtractionMarker
from citekit.api.parse.LinkObject import LinkObject
from citekit.api.parse.LinkTarget import LinkTarget
from citekit.api.parse.TargetPath import TargetPath


def make_link(anchor: str | None = None, marker: str | None = None, link_type: str = "markdown") -> LinkObject:
    anchor_type = None if anchor is None else ("block" if anchor.startswith("^") else "header")
    return LinkObject(
        link_type=link_type,
        scope="cross-document",
        anchor_type=anchor_type,
        source_path="/docs/source.md",
        target=LinkTarget(path=TargetPath(raw="t.md", absolute="/docs/t.md", relative="t.md"), anchor=anchor),
        text="t",
        full_match="[t](t.md)",
        line=1,
        column=0,
        extraction_marker=ExtractionMarker(full_match=f"%%{marker}%%", inner_text=marker) if marker else None,
    )


def test_stop_marker_beats_section_anchor():
    decision = analyze_eligibility(make_link(anchor="Intro", marker="stop-extract-link"), ExtractFlags())
    assert decision == EligibilityDecision(False, "stop-extract-link marker prevents extraction")


def test_stop_marker_beats_full_files_flag():
    decision = analyze_eligibility(make_link(marker="stop-extract-link"), ExtractFlags(full_files=True))
    assert decision.eligible is False


def test_force_marker_without_anchor_or_flag():
    decision = analyze_eligibility(make_link(marker="force-extract"), ExtractFlags(full_files=False))
    assert decision == EligibilityDecision(True, "force-extract overrides defaults")


@pytest.mark.parametrize("anchor", ["Intro", "^block-1"])
def test_anchor_links_eligible_by_default(anchor):
    decision = analyze_eligibility(make_link(anchor=anchor), ExtractFlags())
    assert decision == EligibilityDecision(True, "Markdown anchor links eligible by default")


def test_full_file_link_needs_flag():
    link = make_link()
    assert analyze_eligibility(link, ExtractFlags()) == EligibilityDecision(
        False, "Full-file link ineligible without --full-files flag"
    )
    assert analyze_eligibility(link, ExtractFlags(full_files=True)) == EligibilityDecision(
        True, "CLI flag --full-files forces extraction"
    )


def test_unknown_marker_is_ignored():
    decision = analyze_eligibility(make_link(marker="something-else"), ExtractFlags())
    assert decision.eligible is False
    assert "--full-files" in decision.reason


def test_empty_chain_falls_back():
    assert analyze_eligibility(make_link(), ExtractFlags(), strategies=()) == EligibilityDecision(
        False, "No strategy matched"
    )


def test_new_rule_inserted_by_position():
    def skip_wiki(link, flags):
        if link.link_type == "wiki":
            return EligibilityDecision(False, "wiki links excluded")
        return None

    chain = (ELIGIBILITY_STRATEGIES[0], skip_wiki, *ELIGIBILITY_STRATEGIES[1:])

    assert analyze_eligibility(make_link(anchor="Intro", link_type="wiki"), ExtractFlags(), chain).reason == (
        "wiki links excluded"
    )
    assert analyze_eligibility(make_link(anchor="Intro"), ExtractFlags(), chain).eligible is True
