from ..parse.LinkObject import LinkObject
from ._markers import STOP_EXTRACT_MARKER
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags


def _stop_marker_strategy(link: LinkObject, flags: ExtractFlags) -> EligibilityDecision | None:  # noqa: ARG001
    """A stop marker wins over everything, including --full-files."""
    marker = link.extraction_marker
    if marker is not None and marker.inner_text == STOP_EXTRACT_MARKER:
        return EligibilityDecision(eligible=False, reason=f"{STOP_EXTRACT_MARKER} marker prevents extraction")
    return None
