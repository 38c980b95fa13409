"""Extract links API command."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.extract import ExtractOutput
from ..config.CitekitConfig import CitekitConfig
from ..scope.build_file_cache import build_file_cache
from ..StageResult import StageResult
from ..validate.CitationValidator import CitationValidator
from ..validate.SourceFileNotFound import SourceFileNotFound
from ._finish_extraction import _fail_extraction, _finish_extraction
from .ContentExtractor import ContentExtractor
from .extract_cache import check_extract_cache, write_extract_cache
from .ExtractFlags import ExtractFlags


def cmd_links(
    path: str,
    scope: str | None = None,
    full_files: bool | None = None,
    session: str | None = None,
) -> StageResult:
    """Extract the content cited by a file's cross-document links."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().absolute()

        try:
            yield (0.1, "Loading configuration...")
            config = CitekitConfig.load()

            if session and file_path.exists():
                yield (0.15, f"Checking session cache for {session}...")
                if check_extract_cache(session, file_path, config.extract_cache_dir):
                    result_obj.output = ExtractOutput(path=str(file_path), cached=True).model_dump(mode="python")
                    result_obj.result = f"Already extracted in session {session}: {file_path.name}"
                    result_obj.success = True
                    return

            file_cache = build_file_cache(scope or config.scope.folder)
            flags = ExtractFlags(full_files=config.extract.full_files if full_files is None else full_files)

            yield (0.3, "Validating and extracting citations...")
            extractor = ContentExtractor(citation_validator=CitationValidator(file_cache=file_cache))
            extraction = asyncio.run(extractor.extract_links_content(file_path, flags))
        except (SourceFileNotFound, ValueError) as exc:
            _fail_extraction(result_obj, str(file_path), exc)
            return

        yield (0.9, "Building report...")
        _finish_extraction(result_obj, str(file_path), extraction)
        if session and result_obj.success:
            write_extract_cache(session, file_path, config.extract_cache_dir)

    return StageResult(announce=f"Extracting cited content from {path}...", progress_callback=do_work)
