"""Scope search: resolve bare filenames inside a folder tree."""

from .FileCache import FileCache
from .build_file_cache import build_file_cache
from .FileResolution import FileResolution

__all__ = ["FileCache", "FileResolution", "build_file_cache"]
