"""Validate API command."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.validate import ValidateCheckOutput
from ..config.CitekitConfig import CitekitConfig
from ..scope.build_file_cache import build_file_cache
from ..StageResult import StageResult
from ._constants import STATUS_ERROR, STATUS_WARNING
from .CitationValidator import CitationValidator
from .filter_by_line_range import filter_by_line_range
from .SourceFileNotFound import SourceFileNotFound


def cmd_check(path: str, scope: str | None = None, lines: str | None = None) -> StageResult:
    """Validate every citation in a markdown file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().absolute()

        try:
            yield (0.1, "Loading configuration...")
            config = CitekitConfig.load()

            scope_folder = scope or config.scope.folder
            if scope_folder:
                yield (0.2, f"Indexing scope folder {scope_folder}...")
            file_cache = build_file_cache(scope_folder)

            yield (0.4, "Validating citations...")
            validation = asyncio.run(CitationValidator(file_cache=file_cache).validate_file(file_path))
            if lines:
                validation = filter_by_line_range(validation, lines)
        except (SourceFileNotFound, ValueError) as exc:
            result_obj.output = ValidateCheckOutput(path=str(file_path), errors=[str(exc)]).model_dump(mode="python")
            result_obj.result = f"Validation failed: {exc}"
            result_obj.success = False
            result_obj.system_error = True
            return

        yield (0.9, "Summarizing...")
        errors: list[str] = []
        warnings: list[str] = []
        for link in validation.links:
            record = link.validation
            if record is None or record.is_valid:
                continue
            message = f"Line {link.line}: {record.error}"
            if record.status == STATUS_ERROR:
                errors.append(message)
            elif record.status == STATUS_WARNING:
                warnings.append(message)

        summary = validation.summary
        result_obj.output = ValidateCheckOutput(
            path=validation.file_path,
            summary=summary.to_dict(),
            links=[link.to_dict() for link in validation.links],
            errors=errors,
            warnings=warnings,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Validated {summary.total} citations in {file_path.name}: "
            f"{summary.valid} valid, {summary.warnings} warnings, {summary.errors} errors"
        )
        result_obj.success = summary.errors == 0

    return StageResult(announce=f"Validating citations in {path}...", progress_callback=do_work)
