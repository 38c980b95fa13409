"""Extract file API command."""

import asyncio
from collections.abc import Iterator

from ..config.CitekitConfig import CitekitConfig
from ..scope.build_file_cache import build_file_cache
from ..StageResult import StageResult
from ..validate.CitationValidator import CitationValidator
from ._finish_extraction import _fail_extraction, _finish_extraction
from .cmd_header import _extract_single
from .ContentExtractor import ContentExtractor
from .ExtractFlags import ExtractFlags
from .LinkObjectFactory import LinkObjectFactory


def cmd_file(target: str, scope: str | None = None) -> StageResult:
    """Extract the full content of a target file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        link = LinkObjectFactory().create_file_link(target)
        target_path = link.target.path.absolute or target

        try:
            yield (0.1, "Loading configuration...")
            config = CitekitConfig.load()
            file_cache = build_file_cache(scope or config.scope.folder)

            yield (0.4, "Extracting file content...")
            extractor = ContentExtractor(citation_validator=CitationValidator(file_cache=file_cache))
            extraction = asyncio.run(_extract_single(extractor, link, ExtractFlags(full_files=True)))
        except ValueError as exc:
            _fail_extraction(result_obj, target_path, exc)
            return

        _finish_extraction(result_obj, target_path, extraction)

    return StageResult(announce=f"Extracting {target}...", progress_callback=do_work)
