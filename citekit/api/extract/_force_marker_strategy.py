from ..parse.LinkObject import LinkObject
from ._markers import FORCE_EXTRACT_MARKER
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags


def _force_marker_strategy(link: LinkObject, flags: ExtractFlags) -> EligibilityDecision | None:  # noqa: ARG001
    marker = link.extraction_marker
    if marker is not None and marker.inner_text == FORCE_EXTRACT_MARKER:
        return EligibilityDecision(eligible=True, reason=f"{FORCE_EXTRACT_MARKER} overrides defaults")
    return None
