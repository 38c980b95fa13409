"""Build synthetic links for extracting a header or a whole file on request."""

import os
from pathlib import Path

from ..parse._constants import ANCHOR_HEADER, LINK_TYPE_MARKDOWN, SCOPE_CROSS_DOCUMENT
from ..parse.LinkObject import LinkObject
from ..parse.LinkTarget import LinkTarget
from ..parse.TargetPath import TargetPath


class LinkObjectFactory:
    """Create cross-document links that did not come from a parsed file.

    The source is the current working directory, so relative target paths are
    taken relative to where the command was run.
    """

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = str(Path(cwd) if cwd is not None else Path.cwd())

    def _target_path(self, target: str | Path) -> TargetPath:
        absolute = os.path.normpath(os.path.join(self.cwd, os.path.expanduser(str(target))))
        return TargetPath(raw=absolute, absolute=absolute, relative=os.path.relpath(absolute, self.cwd))

    def create_header_link(self, target: str | Path, header: str) -> LinkObject:
        path = self._target_path(target)
        return LinkObject(
            link_type=LINK_TYPE_MARKDOWN,
            scope=SCOPE_CROSS_DOCUMENT,
            anchor_type=ANCHOR_HEADER,
            source_path=os.path.join(self.cwd, ""),
            target=LinkTarget(path=path, anchor=header),
            text=header,
            full_match=f"[{header}]({path.raw}#{header})",
            line=0,
            column=0,
        )

    def create_file_link(self, target: str | Path) -> LinkObject:
        path = self._target_path(target)
        return LinkObject(
            link_type=LINK_TYPE_MARKDOWN,
            scope=SCOPE_CROSS_DOCUMENT,
            anchor_type=None,
            source_path=os.path.join(self.cwd, ""),
            target=LinkTarget(path=path, anchor=None),
            text=os.path.basename(path.absolute or ""),
            full_match=f"[{os.path.basename(path.absolute or '')}]({path.raw})",
            line=0,
            column=0,
        )
