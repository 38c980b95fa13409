"""Extract header API command."""

import asyncio
from collections.abc import Iterator

from ..config.CitekitConfig import CitekitConfig
from ..parse.LinkObject import LinkObject
from ..scope.build_file_cache import build_file_cache
from ..StageResult import StageResult
from ..validate.CitationValidator import CitationValidator
from ._finish_extraction import _fail_extraction, _finish_extraction
from .ContentExtractor import ContentExtractor
from .ExtractFlags import ExtractFlags
from .ExtractionResult import ExtractionResult
from .LinkObjectFactory import LinkObjectFactory


async def _extract_single(extractor: ContentExtractor, link: LinkObject, flags: ExtractFlags) -> ExtractionResult:
    link.validation = await extractor.citation_validator.validate_single_citation(link)
    return await extractor.extract_content([link], flags)


def cmd_header(target: str, header: str, scope: str | None = None) -> StageResult:
    """Extract one section of a target file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        link = LinkObjectFactory().create_header_link(target, header)
        target_path = link.target.path.absolute or target

        try:
            yield (0.1, "Loading configuration...")
            config = CitekitConfig.load()
            file_cache = build_file_cache(scope or config.scope.folder)

            yield (0.4, f"Extracting section '{header}'...")
            extractor = ContentExtractor(citation_validator=CitationValidator(file_cache=file_cache))
            extraction = asyncio.run(_extract_single(extractor, link, ExtractFlags()))
        except ValueError as exc:
            _fail_extraction(result_obj, target_path, exc)
            return

        _finish_extraction(result_obj, target_path, extraction)

    return StageResult(announce=f"Extracting '{header}' from {target}...", progress_callback=do_work)
