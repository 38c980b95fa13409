"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: Any | None) -> str:
    """Get the display format stored by the root callback, defaulting to yaml.

    Walks from the command's context up through its parents.
    """
    current = ctx
    while current is not None:
        obj = getattr(current, "obj", None)
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = getattr(current, "parent", None)
    return "yaml"


def _handle_stage_result(func: F, ctx: Any | None = None) -> F:
    """Wrap a command function returning a StageResult for CLI display."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from citekit.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
