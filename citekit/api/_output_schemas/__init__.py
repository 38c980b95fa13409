"""Pydantic models describing API command output."""

from ._base import BaseOutputSchema
from .extract import ExtractOutput
from .parse import ParseAstOutput
from .validate import ValidateCheckOutput

__all__ = ["BaseOutputSchema", "ExtractOutput", "ParseAstOutput", "ValidateCheckOutput"]
