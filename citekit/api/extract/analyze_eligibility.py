"""Ordered eligibility rules for content extraction."""

from collections.abc import Callable, Sequence

from ..parse.LinkObject import LinkObject
from ._cli_flag_strategy import _cli_flag_strategy
from ._force_marker_strategy import _force_marker_strategy
from ._section_link_strategy import _section_link_strategy
from ._stop_marker_strategy import _stop_marker_strategy
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags

EligibilityStrategy = Callable[[LinkObject, ExtractFlags], EligibilityDecision | None]

# Highest precedence first. A strategy returns None to abstain.
ELIGIBILITY_STRATEGIES: tuple[EligibilityStrategy, ...] = (
    _stop_marker_strategy,
    _force_marker_strategy,
    _section_link_strategy,
    _cli_flag_strategy,
)


def analyze_eligibility(
    link: LinkObject,
    flags: ExtractFlags,
    strategies: Sequence[EligibilityStrategy] = ELIGIBILITY_STRATEGIES,
) -> EligibilityDecision:
    """Return the decision of the first strategy that does not abstain."""
    for strategy in strategies:
        decision = strategy(link, flags)
        if decision is not None:
            return decision
    return EligibilityDecision(eligible=False, reason="No strategy matched")
