"""Citation validation."""

from .CitationValidator import CitationValidator
from .PathConversion import PathConversion
from .SourceFileNotFound import SourceFileNotFound
from .ValidationMetadata import ValidationMetadata
from .ValidationResult import ValidationResult
from .ValidationSummary import ValidationSummary

__all__ = [
    "CitationValidator",
    "PathConversion",
    "SourceFileNotFound",
    "ValidationMetadata",
    "ValidationResult",
    "ValidationSummary",
]
