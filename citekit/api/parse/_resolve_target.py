import os

from .TargetPath import TargetPath


def _resolve_target(raw: str, source_path: str) -> TargetPath:
    """Resolve a raw link path against the directory of its source file.

    No symlink resolution and no percent-decoding happen here.
    """
    source_dir = os.path.dirname(source_path)
    absolute = raw if os.path.isabs(raw) else os.path.normpath(os.path.join(source_dir, raw))
    return TargetPath(raw=raw, absolute=absolute, relative=os.path.relpath(absolute, source_dir))
