from .._output_schemas.extract import ExtractOutput
from ..StageResult import StageResult
from .ExtractionResult import ExtractionResult
from .ProcessedLink import STATUS_ERROR, STATUS_SKIPPED


def _finish_extraction(result_obj: StageResult, path: str, extraction: ExtractionResult) -> None:
    """Fill a StageResult from an extraction run."""
    errors = []
    warnings = []
    for processed in extraction.processed_links:
        link = processed.source_link
        if processed.status == STATUS_ERROR:
            errors.append(f"Line {link.line}: {processed.failure_reason}")
        elif processed.status == STATUS_SKIPPED:
            warnings.append(f"Line {link.line}: {processed.failure_reason}")

    data = extraction.to_dict()
    result_obj.output = ExtractOutput(
        path=path,
        extracted_content_blocks=data["extracted_content_blocks"],
        outgoing_links_report=data["outgoing_links_report"],
        stats=data["stats"],
        errors=errors,
        warnings=warnings,
    ).model_dump(mode="python")

    stats = extraction.stats
    result_obj.result = (
        f"Extracted {stats.unique_content} unique blocks from {stats.total_links} links "
        f"({stats.duplicate_content_detected} duplicates)"
    )
    result_obj.success = not errors


def _fail_extraction(result_obj: StageResult, path: str, exc: Exception) -> None:
    result_obj.output = ExtractOutput(path=path, errors=[str(exc)]).model_dump(mode="python")
    result_obj.result = f"Extraction failed: {exc}"
    result_obj.success = False
    result_obj.system_error = True
