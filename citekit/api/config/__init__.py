"""Configuration models."""

from .CitekitConfig import CitekitConfig
from .ExtractConfig import ExtractConfig
from .LogConfig import LogConfig
from .ScopeConfig import ScopeConfig

__all__ = ["CitekitConfig", "ExtractConfig", "LogConfig", "ScopeConfig"]
