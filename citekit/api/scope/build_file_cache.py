import logging
from pathlib import Path

from .FileCache import FileCache

logger = logging.getLogger(__name__)


def build_file_cache(scope_folder: str | None) -> FileCache | None:
    """Index a scope folder, or return None when no scope is configured.

    Raises:
        ValueError: If the scope folder is not a directory
    """
    if not scope_folder:
        return None
    if not Path(scope_folder).expanduser().is_dir():
        raise ValueError(f"Scope folder is not a directory: {scope_folder}")
    file_cache = FileCache()
    scan = file_cache.build_cache(scope_folder)
    stats = file_cache.get_cache_stats()
    logger.info(
        "Indexed %d files (%d ambiguous names) in scope %s",
        stats["total_files"],
        stats["duplicate_count"],
        scan["real_scope_folder"],
    )
    return file_cache
