"""Top-level citekit configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ExtractConfig import ExtractConfig
from .LogConfig import LogConfig
from .ScopeConfig import ScopeConfig


class CitekitConfig(BaseModel):
    """Configuration for logging, scope search, and extraction."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    scope: ScopeConfig = Field(default_factory=ScopeConfig)
    extract: ExtractConfig = Field(default_factory=ExtractConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get citekit home directory based on CITEKIT_HOME or default to ~/.citekit."""
        home_env = os.environ.get("CITEKIT_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".citekit"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "CitekitConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: expected an object in {path}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            error_msg = first.get("msg", str(e))
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @property
    def log_path(self) -> Path:
        return self.get_home_dir() / self.log.file

    @property
    def extract_cache_dir(self) -> Path:
        cache_dir = Path(self.extract.cache_dir).expanduser()
        return cache_dir if cache_dir.is_absolute() else self.get_home_dir() / cache_dir

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")
