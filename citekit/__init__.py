"""Citekit - citation validation and content extraction for markdown knowledge bases."""

__version__ = "0.3.0"
