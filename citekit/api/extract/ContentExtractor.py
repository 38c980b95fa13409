"""Pull cited content out of target documents and deduplicate it."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..parse._constants import ANCHOR_BLOCK, ANCHOR_HEADER, SCOPE_INTERNAL
from ..parse.LinkObject import LinkObject
from ..parse.ParsedDocument import ParsedDocument
from ..parse.ParsedFileCache import ParsedFileCache
from ..validate._resolve_target_path import _resolve_target_path
from ..validate.CitationValidator import CitationValidator
from .analyze_eligibility import ELIGIBILITY_STRATEGIES, EligibilityStrategy, analyze_eligibility
from .ContentBlock import ContentBlock, SourceLinkRef
from .EligibilityDecision import EligibilityDecision
from .ExtractFlags import ExtractFlags
from .ExtractionResult import ExtractionResult
from .ExtractionStats import ExtractionStats
from .generate_content_id import generate_content_id
from .normalize_anchor import decode_url_anchor, normalize_block_id
from .ProcessedLink import STATUS_ERROR, STATUS_SKIPPED, STATUS_SUCCESS, ProcessedLink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Outcome:
    status: str
    content: str | None = None
    eligibility_reason: str | None = None
    failure_reason: str | None = None


class ContentExtractor:
    """Extract section, block, or full-file content for the cross-document links of a file.

    Links are validated first, filtered through the eligibility strategies, and
    every extracted string is stored once under its content id.
    """

    def __init__(
        self,
        parsed_file_cache: ParsedFileCache | None = None,
        citation_validator: CitationValidator | None = None,
        strategies: Sequence[EligibilityStrategy] = ELIGIBILITY_STRATEGIES,
    ):
        if parsed_file_cache is None:
            parsed_file_cache = citation_validator.parsed_file_cache if citation_validator else ParsedFileCache()
        self.parsed_file_cache = parsed_file_cache
        self.citation_validator = citation_validator or CitationValidator(parsed_file_cache)
        self.strategies = strategies

    def analyze_eligibility(self, link: LinkObject, flags: ExtractFlags) -> EligibilityDecision:
        return analyze_eligibility(link, flags, self.strategies)

    async def extract_links_content(
        self, source_path: str | Path, flags: ExtractFlags | None = None
    ) -> ExtractionResult:
        """Validate a file, then extract content for its eligible cross-document links.

        Raises:
            SourceFileNotFound: If the source file does not exist
        """
        validation = await self.citation_validator.validate_file(source_path)
        return await self.extract_content(validation.links, flags or ExtractFlags(), validation.file_path)

    async def extract_content(
        self, links: Sequence[LinkObject], flags: ExtractFlags, source_path: str | None = None
    ) -> ExtractionResult:
        """Extract and deduplicate content for already-validated links."""
        candidates = [link for link in links if link.scope != SCOPE_INTERNAL]
        outcomes = await asyncio.gather(*(self._extract_one(link, flags, source_path) for link in candidates))

        blocks: dict[str, ContentBlock] = {}
        processed: list[ProcessedLink] = []
        duplicates = 0
        tokens_saved = 0

        for link, outcome in zip(candidates, outcomes):
            if outcome.content is None:
                processed.append(
                    ProcessedLink(
                        source_link=link,
                        status=outcome.status,
                        eligibility_reason=outcome.eligibility_reason,
                        failure_reason=outcome.failure_reason,
                    )
                )
                continue

            content_id = generate_content_id(outcome.content)
            block = blocks.get(content_id)
            if block is None:
                block = blocks[content_id] = ContentBlock(content=outcome.content)
            else:
                duplicates += 1
                tokens_saved += len(outcome.content)
            block.source_links.append(
                SourceLinkRef(source_path=link.source_path, raw_source_link=link.full_match, source_line=link.line)
            )
            processed.append(
                ProcessedLink(
                    source_link=link,
                    status=STATUS_SUCCESS,
                    content_id=content_id,
                    eligibility_reason=outcome.eligibility_reason,
                )
            )

        stored = sum(block.content_length for block in blocks.values())
        stats = ExtractionStats(
            total_links=len(candidates),
            unique_content=len(blocks),
            duplicate_content_detected=duplicates,
            tokens_saved=tokens_saved,
            compression_ratio=tokens_saved / (stored + tokens_saved) if stored + tokens_saved else 0.0,
        )
        logger.info("Extracted %d unique blocks from %d links", stats.unique_content, stats.total_links)
        return ExtractionResult(blocks=blocks, processed_links=processed, stats=stats)

    async def _extract_one(self, link: LinkObject, flags: ExtractFlags, source_path: str | None) -> _Outcome:
        decision = self.analyze_eligibility(link, flags)
        if not decision.eligible:
            return _Outcome(
                status=STATUS_SKIPPED,
                eligibility_reason=decision.reason,
                failure_reason=f"Link not eligible: {decision.reason}",
            )

        resolution = _resolve_target_path(
            link.target.path.raw or "", source_path or link.source_path, self.citation_validator.file_cache
        )
        if resolution.path is None:
            return _Outcome(
                status=STATUS_ERROR,
                eligibility_reason=decision.reason,
                failure_reason=f"Extraction failed: cannot read target {resolution.standard_path}",
            )

        try:
            document = await self.parsed_file_cache.resolve(resolution.path)
        except Exception as exc:
            logger.debug("Extraction target unreadable %s: %s", resolution.path, exc)
            return _Outcome(
                status=STATUS_ERROR,
                eligibility_reason=decision.reason,
                failure_reason=f"Extraction failed: {exc}",
            )

        content, missing = self._retrieve(document, link)
        if content is None:
            return _Outcome(status=STATUS_SKIPPED, eligibility_reason=decision.reason, failure_reason=missing)
        return _Outcome(status=STATUS_SUCCESS, content=content, eligibility_reason=decision.reason)

    @staticmethod
    def _retrieve(document: ParsedDocument, link: LinkObject) -> tuple[str | None, str | None]:
        """Return (content, None) or (None, reason the anchor was not found)."""
        anchor = link.target.anchor
        if link.anchor_type == ANCHOR_HEADER:
            section = document.extract_section(decode_url_anchor(anchor) or "")
            return (section, None) if section is not None else (None, f"Heading not found: {anchor}")
        if link.anchor_type == ANCHOR_BLOCK:
            block = document.extract_block(normalize_block_id(anchor) or "")
            return (block, None) if block is not None else (None, f"Block not found: {anchor}")
        return document.extract_full_content(), None
