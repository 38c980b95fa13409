"""StageResult dataclass for the announce/progress/result/output command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result of an API command.

    ``progress_callback`` is a generator yielding ``(fraction, message)`` and is
    responsible for filling ``result``, ``output`` and ``success``. ``system_error``
    marks failures to run at all (unreadable source, bad config), as opposed to
    a run that found broken citations.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
    system_error: bool = False
