"""Run a command once and display its result."""

import sys
from collections.abc import Callable
from typing import TypeVar

from .display.Display import Display

F = TypeVar("F", bound=Callable)

EXIT_FAILURE = 1
EXIT_SYSTEM_ERROR = 2


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Announce, stream progress, report the result and print output, then exit.

    Exit status is 0 on success, 1 when the run found problems, and 2 when the
    command could not run at all.
    """
    result = func(*args, **kwargs)

    display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        display.info(f"[dim]Progress: {message} ({progress_percent:.1%})[/dim]")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    for warning in result.output.get("warnings", []):
        display.warning(warning)

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    display.json_output(result.output, format=display_format)

    if result.success:
        sys.exit(0)
    sys.exit(EXIT_SYSTEM_ERROR if result.system_error else EXIT_FAILURE)
