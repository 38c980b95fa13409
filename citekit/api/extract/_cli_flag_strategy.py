from ..parse.LinkObject import LinkObject
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags


def _cli_flag_strategy(link: LinkObject, flags: ExtractFlags) -> EligibilityDecision:  # noqa: ARG001
    """Terminal rule for full-file links: always decides."""
    if flags.full_files:
        return EligibilityDecision(eligible=True, reason="CLI flag --full-files forces extraction")
    return EligibilityDecision(eligible=False, reason="Full-file link ineligible without --full-files flag")
