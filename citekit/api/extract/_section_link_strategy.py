from ..parse.LinkObject import LinkObject
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags


def _section_link_strategy(link: LinkObject, flags: ExtractFlags) -> EligibilityDecision | None:  # noqa: ARG001
    """Links naming a header or block are wanted by default."""
    if link.anchor_type is not None:
        return EligibilityDecision(eligible=True, reason="Markdown anchor links eligible by default")
    return None
