"""Content extraction."""

from .analyze_eligibility import ELIGIBILITY_STRATEGIES, analyze_eligibility
from .ContentExtractor import ContentExtractor
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags
from .ExtractionResult import ExtractionResult
from .generate_content_id import generate_content_id
from .LinkObjectFactory import LinkObjectFactory

__all__ = [
    "ELIGIBILITY_STRATEGIES",
    "ContentExtractor",
    "EligibilityDecision",
    "ExtractFlags",
    "ExtractionResult",
    "LinkObjectFactory",
    "analyze_eligibility",
    "generate_content_id",
]
