"""Resolve and classify every citation in a markdown file."""

import asyncio
import logging
import os
from pathlib import Path

from ..parse._constants import SCOPE_INTERNAL
from ..parse.LinkObject import LinkObject
from ..parse.ParsedDocument import ParsedDocument
from ..parse.ParsedFileCache import ParsedFileCache
from ..scope.FileCache import FileCache
from ._anchor_suggestion import _anchor_suggestion
from ._constants import (
    REASON_ANCHOR_MISSING,
    REASON_FOLDER_REFERENCE,
    REASON_SCOPE_FALLBACK,
    REASON_TARGET_MISSING,
    REASON_UNREADABLE,
)
from ._resolve_target_path import _resolve_target_path
from .PathConversion import PathConversion
from .SourceFileNotFound import SourceFileNotFound
from .TargetResolution import TargetResolution
from .ValidationMetadata import ValidationMetadata
from .ValidationResult import ValidationResult

logger = logging.getLogger(__name__)

FOLDER_SUGGESTION = "Link to a specific file in the folder or to an index document such as README.md or index.md"


class CitationValidator:
    """Validate the links of a file against the files and anchors they point to.

    Each link is checked independently and concurrently; the outcome is attached
    to the link itself as ``link.validation``.
    """

    def __init__(self, parsed_file_cache: ParsedFileCache | None = None, file_cache: FileCache | None = None):
        self.parsed_file_cache = parsed_file_cache if parsed_file_cache is not None else ParsedFileCache()
        self.file_cache = file_cache

    async def validate_file(self, file_path: str | Path) -> ValidationResult:
        """Validate every link in a file.

        Raises:
            SourceFileNotFound: If the file does not exist
            ValueError: If the file exists but cannot be read as UTF-8 text
        """
        source_path = str(Path(file_path).expanduser().absolute())
        if not os.path.exists(source_path):
            raise SourceFileNotFound(source_path)

        try:
            document = await self.parsed_file_cache.resolve(source_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ValueError(f"Cannot read file: {exc}") from exc
        links = document.get_links()
        await asyncio.gather(*(self._enrich(link, source_path) for link in links))

        result = ValidationResult(file_path=source_path, links=links)
        logger.info("Validated %s: %s", source_path, result.summary)
        return result

    async def _enrich(self, link: LinkObject, source_path: str) -> None:
        link.validation = await self.validate_single_citation(link, source_path)

    async def validate_single_citation(self, link: LinkObject, source_path: str | None = None) -> ValidationMetadata:
        """Classify one link. Never raises; failures become error records."""
        source = source_path or link.source_path
        try:
            if link.scope == SCOPE_INTERNAL:
                return await self._validate_internal(link, source)
            return await self._validate_cross_document(link, source)
        except Exception as exc:
            logger.debug("Validation of line %d in %s failed: %s", link.line, source, exc)
            return ValidationMetadata.fail(error=f"Error reading target file: {exc}", reason=REASON_UNREADABLE)

    async def _validate_internal(self, link: LinkObject, source_path: str) -> ValidationMetadata:
        anchor = link.target.anchor
        if not anchor:
            return ValidationMetadata.ok()
        document = await self.parsed_file_cache.resolve(source_path)
        return self._check_anchor(document, anchor) or ValidationMetadata.ok()

    async def _validate_cross_document(self, link: LinkObject, source_path: str) -> ValidationMetadata:
        raw = link.target.path.raw or ""
        anchor = link.target.anchor
        resolution = _resolve_target_path(raw, source_path, self.file_cache)

        if resolution.is_directory:
            return ValidationMetadata.warn(
                error=f"Link points to a folder, not a file: {raw}",
                reason=REASON_FOLDER_REFERENCE,
                suggestion=FOLDER_SUGGESTION,
            )

        if resolution.path is None:
            return ValidationMetadata.fail(
                error=f"File not found: {raw}",
                reason=REASON_TARGET_MISSING,
                suggestion=self._missing_suggestion(resolution),
            )

        if anchor:
            document = await self.parsed_file_cache.resolve(resolution.path)
            missing = self._check_anchor(document, anchor)
            if missing is not None:
                return missing

        if resolution.via_scope:
            return self._scope_fallback(raw, anchor, source_path, resolution)
        return ValidationMetadata.ok()

    def _check_anchor(self, document: ParsedDocument, anchor: str) -> ValidationMetadata | None:
        """Return an error record when the anchor is absent, None when present."""
        if document.find_anchor(anchor) is not None:
            return None
        similar = document.find_similar_anchors(anchor)
        return ValidationMetadata.fail(
            error=f"Anchor not found: #{anchor}",
            reason=REASON_ANCHOR_MISSING,
            suggestion=_anchor_suggestion(document, similar),
            similar_anchors=tuple(similar),
        )

    @staticmethod
    def _missing_suggestion(resolution: TargetResolution) -> str:
        parts = []
        scope = resolution.scope_resolution
        if scope is not None and scope.message:
            parts.append(scope.message)
        else:
            parts.append("Check that the file exists and that the path is relative to the citing document")
        parts.extend(resolution.notes)
        parts.append(f"Tried: {', '.join(resolution.tried)}")
        return "; ".join(parts)

    @staticmethod
    def _scope_fallback(
        raw: str, anchor: str | None, source_path: str, resolution: TargetResolution
    ) -> ValidationMetadata:
        found = resolution.path or ""
        fragment = f"#{anchor}" if anchor else ""
        recommended = os.path.relpath(found, os.path.dirname(source_path)).replace(os.sep, "/")
        conversion = PathConversion(original=f"{raw}{fragment}", recommended=f"{recommended}{fragment}")

        suggestion = f"Use relative path: {conversion.recommended}"
        scope = resolution.scope_resolution
        if scope is not None and scope.fuzzy_match and scope.message:
            suggestion = f"{scope.message}; {suggestion}"

        return ValidationMetadata.warn(
            error=f"Found via file cache in different directory: {found}",
            reason=REASON_SCOPE_FALLBACK,
            suggestion=suggestion,
            path_conversion=conversion,
        )
