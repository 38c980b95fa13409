"""Extraction marker directives recognized after a link."""

STOP_EXTRACT_MARKER = "stop-extract-link"
FORCE_EXTRACT_MARKER = "force-extract"
