"""Markdown parsing and the parsed-file cache."""

from .AnchorObject import AnchorObject
from .ExtractionMarker import ExtractionMarker
from .Heading import Heading
from .LinkObject import LinkObject
from .LinkTarget import LinkTarget
from .MarkdownParser import MarkdownParser
from .ParsedDocument import ParsedDocument
from .ParsedFileCache import ParsedFileCache
from .ParseOutput import ParseOutput
from .TargetPath import TargetPath

__all__ = [
    "AnchorObject",
    "ExtractionMarker",
    "Heading",
    "LinkObject",
    "LinkTarget",
    "MarkdownParser",
    "ParseOutput",
    "ParsedDocument",
    "ParsedFileCache",
    "TargetPath",
]
