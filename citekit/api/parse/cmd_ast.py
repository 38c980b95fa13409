"""Parse (ast) API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.parse import ParseAstOutput
from ..StageResult import StageResult
from .MarkdownParser import MarkdownParser


def cmd_ast(path: str) -> StageResult:
    """Show headings, anchors, and links the parser finds in a file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().absolute()

        yield (0.3, "Parsing markdown...")
        try:
            parsed = MarkdownParser().parse(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            result_obj.output = ParseAstOutput(path=str(file_path), errors=[f"Cannot read file: {exc}"]).model_dump(
                mode="python"
            )
            result_obj.result = f"Cannot parse {path}"
            result_obj.success = False
            result_obj.system_error = True
            return

        data = parsed.to_dict()
        result_obj.output = ParseAstOutput(
            path=str(file_path),
            token_count=len(parsed.tokens),
            headings=data["headings"],
            anchors=data["anchors"],
            links=data["links"],
        ).model_dump(mode="python")
        result_obj.result = (
            f"Parsed {file_path.name}: {len(parsed.headings)} headings, "
            f"{len(parsed.anchors)} anchors, {len(parsed.links)} links"
        )
        result_obj.success = True

    return StageResult(announce=f"Parsing {path}...", progress_callback=do_work)
